"""Date filtering and most-active-cookie selection."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from shared.logger import get_logger

from .parser import CookieLog

logger = get_logger(__name__)


@dataclass
class CookieActivity:
    """Most active cookies within a set of sightings."""

    date: Optional[str]
    total_entries: int
    max_count: int
    cookies: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "date": self.date,
            "total_entries": self.total_entries,
            "max_count": self.max_count,
            "cookies": list(self.cookies),
        }


def get_cookies_on_date(cookie_logs: Iterable[CookieLog], date: str) -> List[CookieLog]:
    """
    Keep the sightings whose date bucket equals `date`.

    The comparison is plain string equality on the timestamp prefix, so no
    timezone conversion happens.
    """
    return [log for log in cookie_logs if log.date == date]


def count_cookies(cookie_logs: Iterable[CookieLog]) -> Counter:
    """Count sightings per cookie, keyed in first-seen order."""
    return Counter(log.cookie for log in cookie_logs)


def _tied_for_max(counts: Counter) -> List[str]:
    if not counts:
        return []

    max_count = max(counts.values())
    return [cookie for cookie, count in counts.items() if count == max_count]


def most_active_cookies(cookie_logs: Iterable[CookieLog]) -> List[str]:
    """
    Get the cookie(s) seen most often.

    Every cookie sharing the highest count is returned, in the order it was
    first seen. An empty input gives an empty list.

    Args:
        cookie_logs: Sightings to aggregate

    Returns:
        Most active cookies
    """
    return _tied_for_max(count_cookies(cookie_logs))


def summarize_activity(cookie_logs: Iterable[CookieLog], date: Optional[str] = None) -> CookieActivity:
    """
    Filter sightings to a date (if given) and find the most active cookies.

    Args:
        cookie_logs: Parsed sightings
        date: Date bucket to restrict to (YYYY-MM-DD), or None for all

    Returns:
        CookieActivity summary
    """
    cookie_logs = list(cookie_logs)
    if date is not None:
        cookie_logs = get_cookies_on_date(cookie_logs, date)
        logger.debug(f"{len(cookie_logs)} entries on {date}")

    counts = count_cookies(cookie_logs)
    max_count = max(counts.values()) if counts else 0

    return CookieActivity(
        date=date,
        total_entries=len(cookie_logs),
        max_count=max_count,
        cookies=_tied_for_max(counts),
    )

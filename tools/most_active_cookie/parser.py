"""Loading and parsing of cookie log files."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Union

from shared.logger import get_logger

logger = get_logger(__name__)

DATE_LENGTH = len("YYYY-MM-DD")


class ParsePolicy(str, Enum):
    """What to do with a record that cannot be parsed."""

    FAIL = "fail"
    SKIP = "skip"


class CookieLogError(ValueError):
    """Base error for cookie log problems."""


class EmptyLogError(CookieLogError):
    """Raised when a log file has no header line."""


class MalformedRecordError(CookieLogError):
    """Raised when a record lacks the cookie and timestamp fields."""

    def __init__(self, line: str, line_number: int = 0):
        self.line = line
        self.line_number = line_number
        super().__init__(f"Malformed record on line {line_number}: {line!r}")


@dataclass(frozen=True)
class CookieLog:
    """A single cookie sighting."""

    cookie: str
    utc_time: str
    line_number: int = field(default=0, compare=False)

    @property
    def date(self) -> str:
        """Date bucket of the sighting (YYYY-MM-DD)."""
        return self.utc_time[:DATE_LENGTH]


def open_csv_file(filepath: Union[str, Path], encoding: str = "utf-8") -> List[str]:
    """
    Read a newline-delimited log file and drop its header.

    Args:
        filepath: Path to the log file
        encoding: File encoding

    Returns:
        Raw record lines, in file order

    Raises:
        FileNotFoundError: If the file does not exist
        UnicodeDecodeError: If the content is not valid text
        EmptyLogError: If the file has no header line
    """
    filepath = Path(filepath)
    logger.debug(f"Reading cookie log: {filepath}")

    with open(filepath, "r", encoding=encoding, newline="") as f:
        contents = f.read()

    if not contents:
        raise EmptyLogError(f"Log file has no header line: {filepath}")

    lines = [line.rstrip("\r") for line in contents.split("\n")]

    # Header
    lines.pop(0)

    logger.debug(f"Read {len(lines)} raw records from {filepath}")
    return lines


def parse_line(line: str, line_number: int = 0) -> CookieLog:
    """
    Parse a `<cookie>,<timestamp>` record.

    Fields after the second are ignored.

    Raises:
        MalformedRecordError: If there are fewer than two fields
    """
    fields = line.split(",")
    if len(fields) < 2:
        raise MalformedRecordError(line, line_number)

    return CookieLog(cookie=fields[0], utc_time=fields[1], line_number=line_number)


def parse_cookie_logs(
    lines: Iterable[str],
    policy: ParsePolicy = ParsePolicy.FAIL,
    first_line_number: int = 2,
) -> List[CookieLog]:
    """
    Parse raw records into CookieLog entries.

    Blank lines at the end of the input are dropped. Any other line without
    a cookie and a timestamp is malformed, and either aborts parsing or is
    dropped with a warning, depending on the policy.

    Args:
        lines: Raw record lines (header already removed)
        policy: Malformed record handling
        first_line_number: File line number of the first record

    Returns:
        Parsed entries, in input order
    """
    lines = list(lines)
    while lines and not lines[-1].strip():
        lines.pop()

    cookie_logs: List[CookieLog] = []
    skipped = 0

    for line_number, line in enumerate(lines, first_line_number):
        try:
            cookie_logs.append(parse_line(line, line_number))
        except MalformedRecordError as e:
            if policy == ParsePolicy.FAIL:
                raise
            logger.warning(f"Skipping {e}")
            skipped += 1

    if skipped:
        logger.info(f"Skipped {skipped} malformed record(s)")

    logger.debug(f"Parsed {len(cookie_logs)} cookie log entries")
    return cookie_logs

"""Most Active Cookie - Find the busiest cookies in a cookie log."""

from .analyzer import CookieActivity, get_cookies_on_date, most_active_cookies
from .parser import CookieLog, MalformedRecordError, ParsePolicy, open_csv_file, parse_cookie_logs

__all__ = [
    "CookieActivity",
    "CookieLog",
    "MalformedRecordError",
    "ParsePolicy",
    "get_cookies_on_date",
    "most_active_cookies",
    "open_csv_file",
    "parse_cookie_logs",
]

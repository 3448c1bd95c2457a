from __future__ import annotations

import calendar
import time
import typing as tp
from email.utils import formatdate, mktime_tz, parsedate_tz

T = tp.TypeVar("T")


class BaseClock:
    def now(self) -> float:
        raise NotImplementedError()


class Clock(BaseClock):
    def now(self) -> float:
        return time.time()


class FrozenClock(BaseClock):
    """
    A clock that always reports the same instant.

    Useful for replaying cache decisions deterministically.
    """

    def __init__(self, timestamp: float) -> None:
        self.timestamp = timestamp

    def now(self) -> float:
        return self.timestamp


def parse_date(date: tp.Optional[str]) -> tp.Optional[int]:
    """
    Parse an HTTP-date into a unix timestamp.

    Returns None for absent or unparsable values instead of raising,
    because dates in the wild are routinely malformed.
    """
    if not date:
        return None
    try:
        parsed = parsedate_tz(date)
    except (TypeError, ValueError, IndexError):
        return None
    if parsed is None:
        return None
    try:
        if parsed[9] is None:
            # HTTP-dates are always expressed in GMT
            return calendar.timegm(parsed[:6])
        return mktime_tz(parsed)
    except (OverflowError, ValueError):
        return None


def parse_non_negative_int(value: tp.Optional[str]) -> tp.Optional[int]:
    """Parse a delta-seconds value, return None if it is absent, invalid or negative."""
    if value is None:
        return None
    value = value.strip()
    if not (value.isascii() and value.isdigit()):
        return None
    # Cap at max int32 for compatibility
    return min(int(value), 2147483647)


def partition(iterable: tp.Iterable[T], predicate: tp.Callable[[T], bool]) -> tp.Tuple[tp.List[T], tp.List[T]]:
    """
    Partition an iterable into two lists: one for matching items and one for non-matching items.

    Args:
        iterable (tp.Iterable[T]): The input iterable to partition.
        predicate (tp.Callable[[T], bool]): A function that evaluates each item in the iterable.

    Returns:
        tp.Tuple[tp.List[T], tp.List[T]]: A tuple containing two lists: the first for matching items,
        and the second for non-matching items.
    Example:
        ```
        iterable = [1, 2, 3, 4, 5]
        is_even = lambda x: x % 2 == 0
        evens, odds = partition(iterable, is_even)
        ```
    """
    matching, non_matching = [], []
    for item in iterable:
        if predicate(item):
            matching.append(item)
        else:
            non_matching.append(item)
    return matching, non_matching


def generate_http_date(timeval: tp.Optional[float] = None) -> str:
    """
    Generate a Date header value for HTTP responses.
    Returns date in RFC 1123 format (required by HTTP/1.1).

    Example output: 'Sun, 26 Oct 2025 12:34:56 GMT'
    """
    return formatdate(timeval=timeval, localtime=False, usegmt=True)

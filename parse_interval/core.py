import logging
from collections.abc import Callable
from datetime import datetime, timedelta
from fractions import Fraction
from zoneinfo import ZoneInfo

from parse_interval.cursor import ScanCursor
from parse_interval.dates import DatePair, DatePolicy, Disallowed, Eager, Lazy
from parse_interval.errors import (
    CalendarUnitWithFractionError,
    EmptyInputError,
    NumberOutOfRangeError,
    diagnose_unit_error,
)
from parse_interval.units import FIRST_FIXED, YEARS, TimeUnit, units

logger = logging.getLogger(__name__)


def parse_interval(text: str, policy: DatePolicy) -> timedelta:
    """Parse interval text like "1 year 15 days 3 hours" into a timedelta.

    Units must appear in strictly descending order of size, each at most
    once. A leading minus flips the sign for that term and every term after
    it, until the next minus. Years and months are only accepted when the
    policy allows them; they are applied to a reference date and the net
    change is folded into the result.

    Args:
        text: Interval text, units matched case-insensitively
        policy: Where the reference date for years and months comes from

    Returns:
        The parsed duration, truncated to whole seconds per term

    Raises:
        ParseError: A subclass naming the exact failure, see parse_interval.errors
    """
    table = units()
    cursor = ScanCursor(text)
    allow_calendar = policy.allows_calendar
    unit_cursor = YEARS if allow_calendar else FIRST_FIXED

    total = timedelta(0)
    dates: DatePair | None = None
    subtracting = False

    cursor.skip_spaces()
    if cursor.is_empty():
        raise EmptyInputError()

    while not cursor.is_empty():
        while cursor.parse_minus():
            subtracting = not subtracting
            cursor.skip_spaces()

        number, fraction = cursor.parse_number()
        cursor.skip_spaces()

        index = _match_unit(cursor, table, unit_cursor)
        if index is None:
            # Every remaining entry was tried and passed
            raise diagnose_unit_error(cursor, table, len(table), allow_calendar)
        unit_cursor = index + 1
        unit = table[index]

        if unit.seconds is None:
            if fraction:
                raise CalendarUnitWithFractionError()
            if dates is None:
                dates = DatePair(policy.materialize())
                logger.debug(
                    "reference date from %s policy: %s",
                    type(policy).__name__,
                    dates.reference.isoformat(),
                )
            months = number * 12 if index == YEARS else number
            dates.shift(months, subtract=subtracting)
        else:
            total = _accumulate(total, number, fraction, unit.seconds, subtracting)

        cursor.skip_spaces()

    if dates is not None:
        total = _checked_add(total, dates.net())
    return total


def _match_unit(
    cursor: ScanCursor, table: tuple[TimeUnit, ...], unit_cursor: int
) -> int | None:
    """Return the index of the first unit at or after `unit_cursor` that matches."""
    for index in range(unit_cursor, len(table)):
        if cursor.parse_unit(table[index]):
            return index
    return None


def _accumulate(
    total: timedelta,
    number: int,
    fraction: Fraction,
    unit_seconds: int,
    subtracting: bool,
) -> timedelta:
    # Fractional seconds are dropped per term
    seconds = number * unit_seconds + int(fraction * unit_seconds)
    try:
        term = timedelta(seconds=seconds)
    except OverflowError as e:
        raise NumberOutOfRangeError() from e
    return _checked_add(total, -term if subtracting else term)


def _checked_add(total: timedelta, term: timedelta) -> timedelta:
    try:
        return total + term
    except OverflowError as e:
        raise NumberOutOfRangeError() from e


def parse_simple(text: str) -> timedelta:
    """Parse an interval of weeks, days, hours, minutes and seconds.

    Years and months are rejected since there is no date to apply them to.

    Example:
        >>> parse_simple("5 weeks 3 days")
        datetime.timedelta(days=38)
    """
    return parse_interval(text, Disallowed())


def parse_with_date(text: str, date: datetime) -> timedelta:
    """Parse an interval, resolving years and months against `date`.

    If obtaining the date is costly, prefer `parse_with_lazy_date`, which
    skips it when the text has no years or months.

    Example:
        >>> parse_with_date("1 month", datetime(2000, 2, 1))
        datetime.timedelta(days=29)
    """
    return parse_interval(text, Eager(date))


def parse_with_lazy_date(text: str, get_date: Callable[[], datetime]) -> timedelta:
    """Parse an interval, resolving years and months against `get_date()`.

    `get_date` is called at most once, and only if the text contains years
    or months.
    """
    return parse_interval(text, Lazy(get_date))


def parse_with_now(text: str, tz: str = "UTC") -> timedelta:
    """Parse an interval, resolving years and months against the current time.

    Args:
        text: Interval text
        tz: IANA timezone name (e.g., "UTC", "US/Pacific") whose calendar
            is used for month lengths
    """
    return parse_with_lazy_date(text, lambda: datetime.now(ZoneInfo(tz)))

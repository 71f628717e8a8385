"""Errors raised while parsing interval text.

Every error derives from `ParseError`, itself a `ValueError`, so callers can
catch the whole family at once or narrow down to a specific kind.
Positional errors carry the byte offset into the UTF-8 encoded input.
"""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from parse_interval.cursor import ScanCursor
    from parse_interval.units import TimeUnit

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """Base class for all interval parsing failures."""

    position: int | None = None


class _PositionalError(ParseError):
    message: str = ""

    def __init__(self, position: int):
        self.position = position
        super().__init__(self.message.format(position=position))


class EmptyInputError(ParseError):
    def __init__(self) -> None:
        super().__init__("Input was empty or had only spaces")


class NoNumberError(_PositionalError):
    message = "Could not parse a number where a number was expected at position {position}"


class NoUnitError(_PositionalError):
    message = "Could not parse a unit where a unit was expected at position {position}"


class UnitOutOfSequenceError(_PositionalError):
    message = (
        "Found a unit out of sequence at position {position}.\n"
        "Units need to be in strictly descending order of size:\n"
        "  years, months, weeks, days, hours, minutes, seconds"
    )


class CalendarUnitWithoutDateError(ParseError):
    def __init__(self) -> None:
        super().__init__(
            "Years or months supplied without a reference date.\n"
            "Hint: use parse_with_date(), parse_with_lazy_date() or parse_with_now()"
        )


class CalendarUnitWithFractionError(ParseError):
    def __init__(self) -> None:
        super().__init__(
            "Years and months must be whole numbers, got a fractional amount"
        )


class DateOutOfRangeError(ParseError):
    def __init__(self) -> None:
        super().__init__(
            "During some step in adjusting years or months, "
            "the date became out of range"
        )


class NumberOutOfRangeError(ParseError):
    def __init__(self) -> None:
        super().__init__("Some operation overflowed or some number was too large")


def diagnose_unit_error(
    cursor: "ScanCursor",
    units: "Sequence[TimeUnit]",
    unit_cursor: int,
    allow_calendar: bool,
) -> ParseError:
    """Classify a failure to find a unit at the cursor's position.

    Re-scans the part of the unit table that has already been passed. A hit
    there means the unit exists but is not allowed here: either it is a
    calendar unit with no reference date, or it is out of sequence.
    """
    position = cursor.offset()
    matched = next(
        (
            index
            for index, unit in enumerate(units[:unit_cursor])
            if cursor.copy().parse_unit(unit)
        ),
        None,
    )

    error: ParseError
    if matched is None:
        error = NoUnitError(position)
    elif units[matched].calendar and not allow_calendar:
        error = CalendarUnitWithoutDateError()
    else:
        error = UnitOutOfSequenceError(position)

    logger.debug("unit diagnosis at %d: %s", position, type(error).__name__)
    return error

import logging
from importlib.resources import files

from .core import (
    parse_interval,
    parse_simple,
    parse_with_date,
    parse_with_lazy_date,
    parse_with_now,
)
from .dates import DatePolicy, Disallowed, Eager, Lazy
from .errors import (
    CalendarUnitWithFractionError,
    CalendarUnitWithoutDateError,
    DateOutOfRangeError,
    EmptyInputError,
    NoNumberError,
    NoUnitError,
    NumberOutOfRangeError,
    ParseError,
    UnitOutOfSequenceError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
}

__all__ = [
    "parse_interval",
    "parse_simple",
    "parse_with_date",
    "parse_with_lazy_date",
    "parse_with_now",
    "DatePolicy",
    "Disallowed",
    "Eager",
    "Lazy",
    "ParseError",
    "EmptyInputError",
    "NoNumberError",
    "NoUnitError",
    "UnitOutOfSequenceError",
    "CalendarUnitWithoutDateError",
    "CalendarUnitWithFractionError",
    "DateOutOfRangeError",
    "NumberOutOfRangeError",
    "docs",
]

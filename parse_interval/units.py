"""The unit table, in strictly descending order of size.

Years and months are calendar units: they have no fixed length and are
resolved against a reference date. Everything from weeks down has a fixed
number of seconds.
"""

import re
from dataclasses import dataclass
from functools import cache

from parse_interval.util import DAY, HOUR, MINUTE, SECOND, WEEK

# (name, seconds per unit, pattern); None marks a calendar unit
_UNITS: tuple[tuple[str, int | None, str], ...] = (
    ("years", None, r"y(?:ears?)?"),
    ("months", None, r"mo(?:nths?)?"),
    ("weeks", WEEK, r"w(?:eeks?)?"),
    ("days", DAY, r"d(?:ays?)?"),
    ("hours", HOUR, r"h(?:(?:ou)?rs?)?"),
    ("minutes", MINUTE, r"m(?:in(?:ute)?s?)?"),
    ("seconds", SECOND, r"s(?:ec(?:ond)?s?)?"),
)

YEARS = 0
MONTHS = 1
FIRST_FIXED = 2


@dataclass(frozen=True, kw_only=True)
class TimeUnit:
    name: str
    seconds: int | None
    pattern: re.Pattern[bytes]

    @property
    def calendar(self) -> bool:
        """True for units resolved with date math instead of a constant."""
        return self.seconds is None

    def __str__(self) -> str:
        return self.name


@cache
def units() -> tuple[TimeUnit, ...]:
    """Return the compiled unit table, built once per process."""
    return tuple(
        TimeUnit(
            name=name,
            seconds=seconds,
            pattern=re.compile(pattern.encode("ascii"), re.IGNORECASE),
        )
        for name, seconds, pattern in _UNITS
    )

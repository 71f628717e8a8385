"""Reference date policies and calendar offsetting.

A policy says whether years and months are allowed, and if so where the
reference date comes from: a concrete value, or a supplier called only once
a calendar unit actually shows up.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from dateutil.relativedelta import relativedelta
from typing_extensions import override

from parse_interval.errors import DateOutOfRangeError


class DatePolicy(ABC):

    @property
    def allows_calendar(self) -> bool:
        return True

    @abstractmethod
    def materialize(self) -> datetime:
        """Produce the reference date. Called at most once per parse."""
        pass


class Disallowed(DatePolicy):
    """No reference date; years and months are rejected."""

    @property
    @override
    def allows_calendar(self) -> bool:
        return False

    @override
    def materialize(self) -> datetime:
        raise RuntimeError("Disallowed date policy has no reference date")


class Eager(DatePolicy):
    """A reference date supplied up front."""

    def __init__(self, date: datetime):
        if not isinstance(date, datetime):
            raise TypeError(
                f"Reference date must be a datetime, got {type(date).__name__}: {date!r}"
            )
        self.date: datetime = date

    @override
    def materialize(self) -> datetime:
        return self.date


class Lazy(DatePolicy):
    """A reference date produced on demand by a zero-argument callable."""

    def __init__(self, get_date: Callable[[], datetime]):
        self.get_date: Callable[[], datetime] = get_date

    @override
    def materialize(self) -> datetime:
        date = self.get_date()
        if not isinstance(date, datetime):
            raise TypeError(
                f"Date supplier must return a datetime, got {type(date).__name__}: {date!r}"
            )
        return date


class DatePair:
    """A fixed reference date and a working offset date.

    The offset starts at the reference and moves by whole months. Month math
    uses `relativedelta`, which clamps the day to the end of shorter months
    (Jan 31 + 1 month is Feb 28 or 29).
    """

    def __init__(self, reference: datetime):
        self._reference: datetime = reference
        self.offset: datetime = reference

    @property
    def reference(self) -> datetime:
        return self._reference

    def shift(self, months: int, subtract: bool = False) -> None:
        """Move the offset date by a number of months.

        Raises:
            DateOutOfRangeError: If the result falls outside the datetime range
        """
        try:
            step = relativedelta(months=months)
            self.offset = self.offset - step if subtract else self.offset + step
        except (OverflowError, ValueError) as e:
            raise DateOutOfRangeError() from e

    def net(self) -> timedelta:
        """Return the offset date minus the reference date.

        Aware datetimes are compared in UTC so DST shifts in between count.
        """
        offset, reference = self.offset, self._reference
        try:
            if offset.tzinfo is not None and reference.tzinfo is not None:
                offset = offset.astimezone(timezone.utc)
                reference = reference.astimezone(timezone.utc)
            return offset - reference
        except (OverflowError, ValueError) as e:
            raise DateOutOfRangeError() from e

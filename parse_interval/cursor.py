"""Left-to-right byte cursor over interval text."""

from fractions import Fraction

from parse_interval.errors import NoNumberError, NumberOutOfRangeError
from parse_interval.units import TimeUnit
from parse_interval.util import FRACTION_DIGITS, MAX_NUMBER

_SPACE = ord(" ")
_MINUS = ord("-")
_POINT = ord(".")
_ZERO = ord("0")
_NINE = ord("9")
_FRACTION_LIMIT = 10**FRACTION_DIGITS


class ScanCursor:
    """Consume interval text strictly left to right.

    The input is encoded once and never copied afterwards; the cursor only
    moves a position index forward. `offset()` is that index, i.e. the byte
    distance from the start of the original text, and is used for error
    reporting only.
    """

    def __init__(self, text: str | bytes):
        if isinstance(text, str):
            # Lone surrogates pass through; they never match a digit or unit
            text = text.encode("utf-8", errors="surrogatepass")
        self._data: bytes = text
        self._position: int = 0

    def __repr__(self) -> str:
        rest = self._data[self._position :].decode("utf-8", errors="replace")
        return f"ScanCursor(offset={self._position}, rest={rest!r})"

    def copy(self) -> "ScanCursor":
        """Return an independent cursor at the same position."""
        clone = ScanCursor.__new__(ScanCursor)
        clone._data = self._data
        clone._position = self._position
        return clone

    def offset(self) -> int:
        return self._position

    def is_empty(self) -> bool:
        return self._position >= len(self._data)

    def skip_spaces(self) -> None:
        data = self._data
        while self._position < len(data) and data[self._position] == _SPACE:
            self._position += 1

    def parse_minus(self) -> bool:
        if not self.is_empty() and self._data[self._position] == _MINUS:
            self._position += 1
            return True
        return False

    def parse_number(self) -> tuple[int, Fraction]:
        """Consume digits with at most one fractional point.

        Returns the integer part and the fractional part in [0, 1). A second
        point ends the number before it. A lone point is not a number.
        Fractional digits past FRACTION_DIGITS are consumed but ignored.

        Raises:
            NoNumberError: If no digits are present at the cursor
            NumberOutOfRangeError: If the integer part exceeds MAX_NUMBER
        """
        data = self._data
        index = self._position
        number = 0
        numerator = 0
        denominator = 1
        seen_point = False

        while index < len(data):
            byte = data[index]
            if byte == _POINT:
                if seen_point:
                    break
                seen_point = True
            elif _ZERO <= byte <= _NINE:
                digit = byte - _ZERO
                if seen_point:
                    if denominator < _FRACTION_LIMIT:
                        numerator = numerator * 10 + digit
                        denominator *= 10
                else:
                    number = number * 10 + digit
                    if number > MAX_NUMBER:
                        raise NumberOutOfRangeError()
            else:
                break
            index += 1

        consumed = index - self._position
        # A lone point is not a number
        if consumed == 0 or (consumed == 1 and seen_point):
            raise NoNumberError(self._position)

        self._position = index
        return number, Fraction(numerator, denominator)

    def parse_unit(self, unit: TimeUnit) -> bool:
        """Consume the unit's name at the cursor if it is there."""
        found = unit.pattern.match(self._data, self._position)
        if found is None:
            return False
        self._position = found.end()
        return True

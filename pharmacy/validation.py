"""Parsing and validation of user-entered numbers, dates and names."""

from __future__ import annotations

from .models import ExpiryDate

MIN_VALID_YEAR = 1800
MAX_VALID_YEAR = 9999

_DIGITS = frozenset("0123456789")
_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


class InvalidInputError(ValueError):
    """Raised when entered text is not an acceptable value."""


def is_leap(year: int) -> bool:
    """Return True if the year is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_valid_date(day: int, month: int, year: int) -> bool:
    """Return True if the date exists and its year is within the accepted range."""
    if not MIN_VALID_YEAR <= year <= MAX_VALID_YEAR:
        return False
    if not 1 <= month <= 12:
        return False
    if not 1 <= day <= 31:
        return False
    if month == 2:
        return day <= (29 if is_leap(year) else 28)
    if month in _THIRTY_DAY_MONTHS:
        return day <= 30
    return True


def parse_int(text: str) -> int:
    """Parse an optionally negative run of ASCII digits."""
    digits = text[1:] if text.startswith("-") else text
    if not digits or not set(digits) <= _DIGITS:
        raise InvalidInputError(f"not a valid integer: {text!r}")
    return int(text)


def parse_date(text: str) -> ExpiryDate:
    """Parse a DD/MM/YYYY date and check that it is a real date."""
    parts = text.split("/")
    if len(parts) != 3 or not all(part and set(part) <= _DIGITS for part in parts):
        raise InvalidInputError(f"invalid date: {text!r}")
    day, month, year = (int(part) for part in parts)
    if not is_valid_date(day, month, year):
        raise InvalidInputError(f"invalid date: {text!r}")
    return ExpiryDate(day, month, year)


def normalize_name(text: str) -> str:
    """Upper-case the ASCII letters of a name, leaving other characters alone."""
    return "".join(chr(ord(c) - 32) if "a" <= c <= "z" else c for c in text)
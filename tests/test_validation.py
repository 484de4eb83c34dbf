import pytest

from pharmacy.models import ExpiryDate
from pharmacy.validation import (
    InvalidInputError,
    is_leap,
    is_valid_date,
    normalize_name,
    parse_date,
    parse_int,
)


@pytest.mark.parametrize(
    "year,expected",
    [(2000, True), (1900, False), (2024, True), (2023, False)],
)
def test_is_leap(year, expected):
    assert is_leap(year) is expected


@pytest.mark.parametrize(
    "day,month,year,expected",
    [
        (29, 2, 2024, True),
        (29, 2, 2023, False),
        (31, 4, 2024, False),
        (30, 4, 2024, True),
        (31, 12, 9999, True),
        (1, 1, 1800, True),
        (1, 1, 1799, False),
        (1, 1, 10000, False),
        (0, 1, 2024, False),
        (1, 13, 2024, False),
        (32, 1, 2024, False),
    ],
)
def test_is_valid_date(day, month, year, expected):
    assert is_valid_date(day, month, year) is expected


@pytest.mark.parametrize("text", ["0", "42", "-7", "007"])
def test_parse_int_accepts_digits(text):
    assert parse_int(text) == int(text)


@pytest.mark.parametrize("text", ["", "-", "12a", "+3", " 1", "1.5", "--1", "٣"])
def test_parse_int_rejects_non_digits(text):
    with pytest.raises(InvalidInputError):
        parse_int(text)


def test_parse_date_valid():
    assert parse_date("15/08/2030") == ExpiryDate(15, 8, 2030)


def test_parse_date_round_trips_str():
    date = ExpiryDate(3, 11, 2027)
    assert parse_date(str(date)) == date


@pytest.mark.parametrize(
    "text",
    ["15-08-2030", "15/08", "1/2/3/4", "aa/08/2030", "31/02/2030", "1//2030", "01/01/1700"],
)
def test_parse_date_rejects(text):
    with pytest.raises(InvalidInputError):
        parse_date(text)


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        parse_int("x")


def test_normalize_name_uppercases_ascii_only():
    assert normalize_name("Panadol extra 500") == "PANADOL EXTRA 500"
    assert normalize_name("é-syrup") == "é-SYRUP"


def test_normalize_name_is_idempotent():
    once = normalize_name("mixed Case")
    assert normalize_name(once) == once
# tests/test_time_utils.py
import pytest

from shift_wage.utils.time_utils import format_time_input, hours_to_hhmm


@pytest.mark.parametrize("typed, expected", [
    ("", ("", 0)),
    ("1", ("1", 1)),
    ("12", ("12:", 2)),
    ("123", ("12:3", 4)),
    ("1234", ("12:34", 5)),
    ("12345", ("12:34", 5)),
    ("12:", ("12:", 2)),
    ("12:3", ("12:3", 4)),
])
def test_format_time_input_as_user_types(typed, expected):
    assert format_time_input(typed) == expected


def test_format_time_input_strips_non_digits():
    assert format_time_input("ab1:2x34") == ("12:34", 5)
    assert format_time_input("::") == ("", 0)


def test_format_time_input_handles_paste_of_full_time():
    assert format_time_input("09:30") == ("09:30", 5)
    assert format_time_input(" 23:59:59 ") == ("23:59", 5)


def test_format_time_input_does_not_validate_ranges():
    # Range checks belong to the wage service
    assert format_time_input("9999") == ("99:99", 5)


def test_format_time_input_none():
    assert format_time_input(None) == ("", 0)


def test_hours_to_hhmm():
    assert hours_to_hhmm(1.25) == "1h 15m"
    assert hours_to_hhmm(8.0) == "8h 0m"
    assert hours_to_hhmm(10 / 60) == "0h 10m"
    assert hours_to_hhmm(0) == "0h 0m"
    assert hours_to_hhmm(None) == "0h 0m"
    assert hours_to_hhmm(-1) == "0h 0m"

import pytest

from timekeeper.common.time_utils import format_hours, minutes_to_time, time_to_minutes


def test_time_to_minutes():
    assert time_to_minutes("00:00") == 0
    assert time_to_minutes("09:30") == 570
    assert time_to_minutes("23:59") == 23 * 60 + 59


def test_minutes_to_time_zero_pads():
    assert minutes_to_time(0) == "00:00"
    assert minutes_to_time(65) == "01:05"
    assert minutes_to_time(1439) == "23:59"


@pytest.mark.parametrize("value", ["00:00", "00:01", "07:05", "12:00", "13:45", "23:59"])
def test_round_trip(value):
    assert minutes_to_time(time_to_minutes(value)) == value


def test_round_trip_every_minute_of_the_day():
    for minutes in range(24 * 60):
        text = minutes_to_time(minutes)
        assert minutes_to_time(time_to_minutes(text)) == text


@pytest.mark.parametrize(
    "minutes,expected",
    [(0, "0.00"), (480, "8.00"), (450, "7.50"), (1, "0.02"), (20, "0.33"), (50, "0.83")],
)
def test_format_hours_two_decimals(minutes, expected):
    assert format_hours(minutes) == expected

import pytest

from gpxactivity.utils import (
    format_distance,
    format_duration_hms,
    format_speed,
    meters_to_km,
    meters_to_miles,
)


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0:00:00"),
        (59.9, "0:00:59"),
        (3661, "1:01:01"),
        (36000, "10:00:00"),
        (-5, "-0:00:05"),
    ],
)
def test_format_duration_hms(seconds, expected):
    assert format_duration_hms(seconds) == expected


def test_distance_conversions():
    assert meters_to_km(1500) == 1.5
    assert meters_to_miles(1609.344) == pytest.approx(1.0, rel=1e-4)
    assert format_distance(1500) == "1.50 km"
    assert format_distance(1609.344, "imperial") == "1.00 mi"


def test_speed_formatting():
    assert format_speed(10) == "36.0 km/h"
    assert format_speed(10, "imperial") == "22.4 mph"

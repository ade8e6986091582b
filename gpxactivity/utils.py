"""Shared utility functions for the gpxactivity package."""

from __future__ import annotations

METERS_TO_MILES = 0.00062137
MPS_TO_KPH = 3.6
MPS_TO_MPH = 2.2369363


def meters_to_miles(meters: float) -> float:
    return meters * METERS_TO_MILES


def meters_to_km(meters: float) -> float:
    return meters / 1000


def mps_to_kph(mps: float) -> float:
    return mps * MPS_TO_KPH


def mps_to_mph(mps: float) -> float:
    return mps * MPS_TO_MPH


def format_duration_hms(seconds: float) -> str:
    """Format a duration in seconds as ``H:MM:SS``.

    Fractions of a second are truncated; negative durations get a leading ``-``.

    Args:
        seconds: Duration in seconds.

    Returns:
        e.g. ``"1:01:01"`` for 3661.
    """
    sign = "-" if seconds < 0 else ""
    total = int(abs(seconds))
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{sign}{hours}:{minutes:02d}:{secs:02d}"


def format_distance(meters: float, units: str = "metric") -> str:
    if units == "imperial":
        return f"{meters_to_miles(meters):.2f} mi"
    return f"{meters_to_km(meters):.2f} km"


def format_speed(mps: float, units: str = "metric") -> str:
    if units == "imperial":
        return f"{mps_to_mph(mps):.1f} mph"
    return f"{mps_to_kph(mps):.1f} km/h"

"""Core Activity model for gpxactivity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, NamedTuple


class Position(NamedTuple):
    """Latitude/longitude in decimal degrees."""

    lat: float
    lon: float


@dataclass(frozen=True, slots=True)
class TrackPoint:
    """A single GPS sample with the distance and speed derived for it."""

    time: datetime
    position: Position
    altitude: float = 0.0
    heart_rate: float | None = None
    distance: float = 0.0  # meters since the first point of the lap
    speed: float = 0.0  # meters/second since the previous point


@dataclass(frozen=True, slots=True)
class Lap:
    """One GPX track segment and its totals."""

    trackpoints: tuple[TrackPoint, ...]
    total_distance: float = 0.0  # meters
    total_time: float = 0.0  # seconds
    max_speed: float = 0.0  # meters/second

    @property
    def start_time(self) -> datetime:
        return self.trackpoints[0].time

    @property
    def end_time(self) -> datetime:
        return self.trackpoints[-1].time

    @property
    def average_speed(self) -> float:
        if not self.total_time:
            return 0.0
        return self.total_distance / self.total_time


@dataclass(frozen=True, slots=True)
class Activity:
    """
    Central representation of an activity parsed from a GPX track.

    Laps keep document order. A parser only returns an Activity that has at
    least one lap with at least one trackpoint.
    """

    start_time: datetime
    type: str
    laps: tuple[Lap, ...]

    @property
    def trackpoints(self) -> list[TrackPoint]:
        return [point for lap in self.laps for point in lap.trackpoints]

    @property
    def total_distance(self) -> float:
        return sum(lap.total_distance for lap in self.laps)

    @property
    def total_time(self) -> float:
        return sum(lap.total_time for lap in self.laps)

    @property
    def max_speed(self) -> float:
        return max((lap.max_speed for lap in self.laps), default=0.0)

    @property
    def average_speed(self) -> float:
        total_time = self.total_time
        if not total_time:
            return 0.0
        return self.total_distance / total_time

    @property
    def max_heart_rate(self) -> float | None:
        rates = [p.heart_rate for p in self.trackpoints if p.heart_rate is not None]
        return max(rates) if rates else None

    @property
    def average_heart_rate(self) -> float | None:
        rates = [p.heart_rate for p in self.trackpoints if p.heart_rate is not None]
        return sum(rates) / len(rates) if rates else None

    @property
    def elevation_gain(self) -> float:
        """Sum of positive altitude changes, measured within each lap."""
        gain = 0.0
        for lap in self.laps:
            for previous, point in zip(lap.trackpoints, lap.trackpoints[1:]):
                climb = point.altitude - previous.altitude
                if climb > 0:
                    gain += climb
        return gain

    def to_dict(self) -> dict[str, Any]:
        """Return a flat summary of the activity."""
        return {
            "start_time": self.start_time.isoformat(),
            "activity_type": self.type,
            "distance": self.total_distance,
            "duration": self.total_time,
            "max_speed": self.max_speed,
            "lap_count": len(self.laps),
        }

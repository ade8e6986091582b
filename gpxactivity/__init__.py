"""This is the init module for gpxactivity"""

from .activity import Activity, Lap, Position, TrackPoint
from .errors import EmptySegment, FileNotFound, GpxActivityError, InvalidActivity, MissingTimestamp
from .formats import (
    build_lap,
    build_trackpoint,
    parse_gpx,
    parse_gpx_multiple,
    parse_gpx_multiple_string,
    parse_gpx_string,
)
from .geo import geodesic_distance

__version__ = "0.1.0"
__all__ = [
    "Activity",
    "EmptySegment",
    "FileNotFound",
    "GpxActivityError",
    "InvalidActivity",
    "Lap",
    "MissingTimestamp",
    "Position",
    "TrackPoint",
    "build_lap",
    "build_trackpoint",
    "geodesic_distance",
    "parse_gpx",
    "parse_gpx_multiple",
    "parse_gpx_multiple_string",
    "parse_gpx_string",
]

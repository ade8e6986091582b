"""File format handlers for activity data files (GPX)."""

from .gpx import (
    build_lap,
    build_trackpoint,
    parse_gpx,
    parse_gpx_multiple,
    parse_gpx_multiple_string,
    parse_gpx_string,
)

__all__ = [
    "build_lap",
    "build_trackpoint",
    "parse_gpx",
    "parse_gpx_multiple",
    "parse_gpx_multiple_string",
    "parse_gpx_string",
]

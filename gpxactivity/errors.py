"""Error types raised while loading and parsing GPX activity files."""

from __future__ import annotations


class GpxActivityError(Exception):
    """Base error for everything gpxactivity raises."""


class FileNotFound(GpxActivityError, FileNotFoundError):
    """Raised when the GPX file cannot be located."""


class InvalidActivity(GpxActivityError, ValueError):
    """Raised when a document lacks the minimum structure of an activity."""


class MissingTimestamp(GpxActivityError, ValueError):
    """Raised when a trackpoint has no usable <time> value."""


class EmptySegment(GpxActivityError, ValueError):
    """Raised when a lap is built from a segment without trackpoints."""


__all__ = [
    "GpxActivityError",
    "FileNotFound",
    "InvalidActivity",
    "MissingTimestamp",
    "EmptySegment",
]

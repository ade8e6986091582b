"""GPX file format parser for gpxactivity.

This module turns GPX (GPS Exchange Format) tracks into Activity objects. GPX
only records timestamped positions, so the cumulative distance, speed and lap
totals are calculated here from consecutive trackpoints.

Each <trk> becomes an Activity and each non-empty <trkseg> one of its Laps.
"""

import logging
import os
from collections.abc import Iterable
from datetime import UTC, datetime

from dateutil.parser import isoparse

from gpxactivity.activity import Activity, Lap, Position, TrackPoint
from gpxactivity.errors import EmptySegment, InvalidActivity, MissingTimestamp
from gpxactivity.geo import geodesic_distance
from gpxactivity.loader import load, load_string
from gpxactivity.nodes import Node, child_text

logger = logging.getLogger(__name__)


def _to_float(value: str | None, default: float | None = 0.0) -> float | None:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def parse_time(node: Node) -> datetime:
    """Return the timezone-aware <time> of a trackpoint node.

    Naive timestamps are taken to be UTC, which is what the GPX schema requires.
    """
    text = child_text(node, "time")
    if not text:
        raise MissingTimestamp(f"Trackpoint at lat={node.attrib('lat')} lon={node.attrib('lon')} has no <time>")
    try:
        time = isoparse(text)
    except (ValueError, OverflowError) as e:
        raise MissingTimestamp(f"Unable to parse trackpoint time {text!r}: {e}") from e
    if time.tzinfo is None:
        time = time.replace(tzinfo=UTC)
    return time


def _heart_rate(node: Node) -> float | None:
    # <extensions><gpxtpx:TrackPointExtension><gpxtpx:hr>
    extensions = node.child("extensions")
    if extensions is None:
        return None
    extension = extensions.child("TrackPointExtension")
    if extension is None:
        return None
    return _to_float(child_text(extension, "hr"), default=None)


def build_trackpoint(node: Node, previous: TrackPoint | None = None) -> TrackPoint:
    """Build a TrackPoint from a <trkpt> node.

    *previous* is the point built just before this one in the same lap, or
    None for the first point. Distance and speed are measured from it.
    """
    time = parse_time(node)
    position = Position(_to_float(node.attrib("lat")), _to_float(node.attrib("lon")))
    altitude = _to_float(child_text(node, "ele"))
    heart_rate = _heart_rate(node)

    if previous is None:
        return TrackPoint(time=time, position=position, altitude=altitude, heart_rate=heart_rate)

    # GPX doesn't store distance travelled, so work it out from lat/lon
    travelled = geodesic_distance(previous.position, position)

    # Points are usually a second apart but that isn't guaranteed
    elapsed = (time - previous.time).total_seconds()
    speed = travelled / elapsed if elapsed != 0 else 0.0

    return TrackPoint(
        time=time,
        position=position,
        altitude=altitude,
        heart_rate=heart_rate,
        distance=previous.distance + travelled,
        speed=speed,
    )


def build_lap(points: Iterable[Node]) -> Lap:
    """Build a Lap from the <trkpt> nodes of one <trkseg>, in document order."""
    trackpoints: list[TrackPoint] = []
    previous: TrackPoint | None = None
    total_time = 0.0
    max_speed = 0.0

    for node in points:
        point = build_trackpoint(node, previous)
        if previous is not None:
            total_time += (point.time - previous.time).total_seconds()
        max_speed = max(max_speed, point.speed)
        trackpoints.append(point)
        previous = point

    if previous is None:
        raise EmptySegment("Track segment has no trackpoints")

    return Lap(
        trackpoints=tuple(trackpoints),
        total_distance=previous.distance,
        total_time=total_time,
        max_speed=max_speed,
    )


def _build_laps(track: Node) -> list[Lap]:
    laps = []
    for index, segment in enumerate(track.children("trkseg")):
        points = segment.children("trkpt")
        if not points:
            # some devices write empty segments
            logger.debug("Skipping empty track segment %d", index)
            continue
        laps.append(build_lap(points))
    return laps


def _root(source, max_elements: int) -> Node:
    if isinstance(source, (str, os.PathLike)):
        return load(source, max_elements=max_elements)
    return source


def _first_point(track: Node) -> Node | None:
    segment = track.child("trkseg")
    if segment is None:
        return None
    return segment.child("trkpt")


def parse_gpx(source, max_elements: int = 0) -> Activity:
    """Parse the first track of a GPX file into an Activity.

    *source* is a file path or an already loaded root node.
    """
    root = _root(source, max_elements)

    track = root.child("trk")
    if track is None:
        raise InvalidActivity("Unable to find valid activity in file contents")

    first_point = _first_point(track)
    if first_point is None:
        raise InvalidActivity("First track segment has no trackpoints")

    start_time = parse_time(first_point)
    activity_type = child_text(track, "name") or ""

    laps = _build_laps(track)
    if not laps:
        raise InvalidActivity("Track has no trackpoints")

    return Activity(start_time=start_time, type=activity_type, laps=tuple(laps))


def parse_gpx_multiple(source, max_elements: int = 0) -> list[Activity]:
    """Parse every track of a GPX file, returning one Activity per valid track.

    Tracks whose first segment or first trackpoint is missing are skipped. A
    file with no usable tracks gives an empty list.
    """
    root = _root(source, max_elements)

    if not root.has_attributes() and root.child("trk") is None and root.child("wpt") is None:
        raise InvalidActivity("Unable to find valid activity in file contents")

    activities = []
    for index, track in enumerate(root.children("trk")):
        first_point = _first_point(track)
        if first_point is None:
            logger.debug("Skipping track %d: no trackpoints in its first segment", index)
            continue

        start_time = parse_time(first_point)
        activity_type = child_text(track, "type") or child_text(track, "name") or ""
        laps = _build_laps(track)
        activities.append(Activity(start_time=start_time, type=activity_type, laps=tuple(laps)))

    logger.debug("Parsed %d activities", len(activities))
    return activities


def parse_gpx_string(text: str | bytes, max_elements: int = 0) -> Activity:
    """Parse GPX held in memory; see parse_gpx."""
    return parse_gpx(load_string(text, max_elements=max_elements))


def parse_gpx_multiple_string(text: str | bytes, max_elements: int = 0) -> list[Activity]:
    """Parse GPX held in memory; see parse_gpx_multiple."""
    return parse_gpx_multiple(load_string(text, max_elements=max_elements))

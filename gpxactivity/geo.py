"""Great-circle distance between two lat/lon pairs."""

from __future__ import annotations

from gpxpy.geo import haversine_distance

LatLon = tuple[float, float]


def geodesic_distance(a: LatLon, b: LatLon) -> float:
    """Return the haversine distance in meters between two (lat, lon) pairs.

    Coordinates are decimal degrees and are not range checked.
    """
    # fixed argument order keeps the result bit-for-bit symmetric
    if tuple(b) < tuple(a):
        a, b = b, a
    return haversine_distance(a[0], a[1], b[0], b[1])

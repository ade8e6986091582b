"""Shared GPX builders and fixtures for the test suite."""

from __future__ import annotations

import pytest

from gpxactivity.loader import load_string

GPX_HEADER = (
    '<gpx version="1.1" creator="pytest" '
    'xmlns="http://www.topografix.com/GPX/1/1" '
    'xmlns:gpxtpx="http://www.garmin.com/xmlschemas/TrackPointExtension/v1">'
)


class GpxXml:
    """Builds GPX documents as text, one element at a time."""

    @staticmethod
    def trkpt(lat=38.5, lon=-120.2, time="2024-05-27T12:00:00Z", ele=None, hr=None, extensions=None) -> str:
        attrs = ""
        if lat is not None:
            attrs += f' lat="{lat}"'
        if lon is not None:
            attrs += f' lon="{lon}"'
        body = ""
        if ele is not None:
            body += f"<ele>{ele}</ele>"
        if time is not None:
            body += f"<time>{time}</time>"
        if hr is not None:
            extensions = f"<gpxtpx:TrackPointExtension><gpxtpx:hr>{hr}</gpxtpx:hr></gpxtpx:TrackPointExtension>"
        if extensions is not None:
            body += f"<extensions>{extensions}</extensions>"
        return f"<trkpt{attrs}>{body}</trkpt>"

    @staticmethod
    def trkseg(*points: str) -> str:
        return f"<trkseg>{''.join(points)}</trkseg>"

    @staticmethod
    def trk(*segments: str, name=None, type=None) -> str:
        head = ""
        if name is not None:
            head += f"<name>{name}</name>"
        if type is not None:
            head += f"<type>{type}</type>"
        return f"<trk>{head}{''.join(segments)}</trk>"

    @staticmethod
    def document(*content: str, header: str = GPX_HEADER, encoding: str = "UTF-8") -> str:
        return f'<?xml version="1.0" encoding="{encoding}"?>\n{header}{"".join(content)}</gpx>\n'


class FakeNode:
    """In-memory Node used to feed the parser without any XML."""

    def __init__(self, tag, text=None, attrs=None, children=()):
        self.tag = tag
        self.text = text
        self._attrs = dict(attrs or {})
        self._children = list(children)

    def attrib(self, name):
        return self._attrs.get(name)

    def has_attributes(self):
        return bool(self._attrs)

    def child(self, name):
        for node in self._children:
            if node.tag == name:
                return node
        return None

    def children(self, name):
        return [node for node in self._children if node.tag == name]


@pytest.fixture
def gpx_xml():
    return GpxXml


@pytest.fixture
def fake_node():
    return FakeNode


@pytest.fixture
def fake_trkpt():
    """Return a helper that builds a synthetic <trkpt> node."""

    def _build(lat, lon, time, ele=None):
        children = [FakeNode("time", time)]
        if ele is not None:
            children.append(FakeNode("ele", str(ele)))
        return FakeNode("trkpt", attrs={"lat": str(lat), "lon": str(lon)}, children=children)

    return _build


@pytest.fixture
def trkpt_nodes():
    """Return a helper that loads <trkpt> snippets as nodes of a single segment."""

    def _load(*xml_points):
        document = GpxXml.document(GpxXml.trk(GpxXml.trkseg(*xml_points)))
        return load_string(document).child("trk").child("trkseg").children("trkpt")

    return _load


@pytest.fixture
def write_gpx(tmp_path):
    """Return a helper that writes GPX text to a file and returns its path."""

    def _write(content: str, name: str = "test.gpx") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write

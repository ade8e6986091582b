"""Loading GPX documents from disk or memory.

Plain ``.gpx`` files and gzip-compressed ``.gpx.gz`` files are supported.
"""

import gzip
import logging
import os
import xml.etree.ElementTree as ET

from .errors import FileNotFound, InvalidActivity
from .nodes import ElementNode

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024


def exists(path) -> bool:
    """Return True if *path* is an existing regular file."""
    return os.path.isfile(path)


def is_gzipped(path) -> bool:
    return str(path).lower().endswith(".gz")


def _read_bytes(path) -> bytes:
    if is_gzipped(path):
        with gzip.open(path, "rb") as f:
            # some exporters pad the compressed payload with leading whitespace
            return f.read().lstrip()
    with open(path, "rb") as f:
        return f.read()


def _parse(data: str | bytes, source: str, max_elements: int = 0) -> ElementNode:
    """Parse *data* incrementally, stopping as soon as *max_elements* is exceeded.

    ``str`` input is decoded text, so any ``encoding=`` declaration in it is
    ignored; ``bytes`` input is decoded according to that declaration.
    """
    parser = ET.XMLPullParser(events=("start",))
    root = None
    count = 0
    try:
        for offset in range(0, len(data), _CHUNK_SIZE):
            parser.feed(data[offset : offset + _CHUNK_SIZE])
            for _event, element in parser.read_events():
                if root is None:
                    root = element
                count += 1
                if max_elements and count > max_elements:
                    raise InvalidActivity(f"{source} has more than the limit of {max_elements} elements")
        parser.close()
    except ET.ParseError as e:
        logger.warning("Unable to parse XML in %s: %s", source, e)
        raise InvalidActivity(f"Unable to parse XML in {source}: {e}") from e

    return ElementNode(root)


def load(path, max_elements: int = 0) -> ElementNode:
    """Load the GPX file at *path* and return its root node.

    Raises FileNotFound if the file is missing and InvalidActivity if it is
    not well-formed XML. When *max_elements* is non-zero, parsing stops with
    InvalidActivity as soon as more than that many elements have been read;
    the raw file is still read into memory first.
    """
    if not exists(path):
        raise FileNotFound(f"File not found: {path}")

    try:
        data = _read_bytes(path)
    except (OSError, EOFError) as e:
        # unreadable or truncated gzip stream
        raise InvalidActivity(f"Unable to read {path}: {e}") from e

    logger.debug("Loaded %d bytes from %s", len(data), path)
    return _parse(data, str(path), max_elements)


def load_string(text: str | bytes, max_elements: int = 0) -> ElementNode:
    """Parse GPX held in memory and return its root node.

    Text is used as already decoded; bytes follow the document's own
    ``encoding=`` declaration.
    """
    return _parse(text.lstrip(), "<string>", max_elements)

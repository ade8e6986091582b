"""Read-only view over an XML element tree.

The GPX parser only talks to the ``Node`` protocol, so it does not care which
XML library produced the tree. ``ElementNode`` wraps ``xml.etree.ElementTree``
elements and matches children by local name, which lets GPX 1.0, GPX 1.1 and
vendor extension namespaces (e.g. Garmin's ``gpxtpx``) be read the same way.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Protocol


class Node(Protocol):
    @property
    def tag(self) -> str: ...

    @property
    def text(self) -> str | None: ...

    def attrib(self, name: str) -> str | None: ...

    def has_attributes(self) -> bool: ...

    def child(self, name: str) -> Node | None: ...

    def children(self, name: str) -> list[Node]: ...


def local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from an ElementTree tag."""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


class ElementNode:
    """``Node`` backed by an ElementTree element."""

    __slots__ = ("_element",)

    def __init__(self, element: ET.Element):
        self._element = element

    def __repr__(self) -> str:
        return f"ElementNode({self.tag!r})"

    @property
    def tag(self) -> str:
        return local_name(self._element.tag)

    @property
    def text(self) -> str | None:
        if self._element.text is None:
            return None
        return self._element.text.strip()

    def attrib(self, name: str) -> str | None:
        return self._element.get(name)

    def has_attributes(self) -> bool:
        return bool(self._element.attrib)

    def child(self, name: str) -> ElementNode | None:
        for element in self._element:
            if local_name(element.tag) == name:
                return ElementNode(element)
        return None

    def children(self, name: str) -> list[ElementNode]:
        return [ElementNode(e) for e in self._element if local_name(e.tag) == name]


def child_text(node: Node, name: str) -> str | None:
    """Return the stripped text of the first ``name`` child, or None."""
    found = node.child(name)
    if found is None:
        return None
    return found.text

"""
Reader for WordPress WXR export documents.

:func:`load_export` parses the export text with ``xml.etree.ElementTree`` and
wraps the root element in an :class:`XmlNode`, which offers the small
:class:`~wp_export.models.RawNode` interface the extractors rely on.
Namespaces are ignored when matching tags: ``wp:post_type`` is reached as
``post_type`` and the two ``encoded`` elements of an item (``content:encoded``
and ``excerpt:encoded``) are told apart by their occurrence index.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import List, Optional

from wp_export.utils.errors import ExportStructureError


def _local_name(tag: str) -> str:
    if isinstance(tag, str) and tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


class XmlNode:
    """An ElementTree element with a link to the node it was reached from."""

    def __init__(self, element: ET.Element, parent: Optional["XmlNode"] = None) -> None:
        self.element = element
        self._parent = parent

    @property
    def parent(self) -> Optional["XmlNode"]:
        return self._parent

    @property
    def tag(self) -> str:
        return _local_name(self.element.tag)

    def __repr__(self) -> str:
        return f"<XmlNode {self.tag}>"

    def children(self, tag: str) -> List["XmlNode"]:
        return [XmlNode(el, self) for el in self.element if _local_name(el.tag) == tag]

    def child(self, tag: str) -> "XmlNode":
        for el in self.element:
            if _local_name(el.tag) == tag:
                return XmlNode(el, self)
        raise ExportStructureError(f"Could not find <{tag}> inside <{self.tag}>.")

    def optional_child_value(self, tag: str, index: int = 0) -> Optional[str]:
        matches = self.children(tag)
        if index >= len(matches):
            return None
        return matches[index].element.text or ""

    def child_value(self, tag: str, index: int = 0) -> str:
        value = self.optional_child_value(tag, index)
        if value is None:
            raise ExportStructureError(f"Could not find <{tag}> (#{index}) inside <{self.tag}>.")
        return value

    def attribute(self, name: str) -> Optional[str]:
        return self.element.get(name)


def load_export(content: str) -> XmlNode:
    """Parse the export text and return its root (``<rss>``) node.

    Raises:
        ExportStructureError: If the text is not well-formed XML.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise ExportStructureError(f"Could not parse export: {e}") from e
    return XmlNode(root)

"""Wrappers over the XML (xCard) and HTML (hCard) element models.

The document readers own the parsed trees; properties only ever see the
single element that belongs to them, through these wrappers.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional
from urllib.parse import urljoin
from xml.etree import ElementTree as ET

from lxml import html

from cardprop.core.types import XCARD_NAMESPACE, VCardVersion

_WHITESPACE = re.compile(r"\s+")


def split_tag(tag: str) -> tuple[Optional[str], str]:
    """Split ``{namespace}local`` into its parts."""
    if tag.startswith("{"):
        namespace, _, local = tag[1:].partition("}")
        return namespace, local
    return None, tag


class XCardElement:
    """Version-aware accessor over a single xCard property element.

    The ``<parameters>`` child has already been removed by the reader.
    """

    def __init__(self, element: ET.Element, version: VCardVersion = VCardVersion.V4_0):
        self._element = element
        self._version = version
        namespace, _ = split_tag(element.tag)
        self._namespace = namespace if namespace is not None else XCARD_NAMESPACE

    @property
    def element(self) -> ET.Element:
        return self._element

    @property
    def version(self) -> VCardVersion:
        return self._version

    @property
    def namespace(self) -> str:
        return self._namespace

    def _qualify(self, name: str) -> str:
        return f"{{{self._namespace}}}{name}"

    def _children(self) -> Iterator[tuple[str, ET.Element]]:
        for child in self._element:
            if not isinstance(child.tag, str):
                continue
            namespace, local = split_tag(child.tag)
            if namespace in (None, self._namespace):
                yield local, child

    def append(self, name: str, value: Optional[str]) -> ET.Element:
        """Append a child element holding a text value."""
        child = ET.SubElement(self._element, self._qualify(name))
        child.text = value
        return child

    def append_all(self, name: str, values: list[str]) -> list[ET.Element]:
        return [self.append(name, value) for value in values]

    def first(self, *names: str) -> Optional[str]:
        """Text of the first child, in document order, whose name matches."""
        for local, child in self._children():
            if local in names:
                return child.text or ""
        return None

    def all(self, name: str) -> list[str]:
        """Text of every child with the given name, in document order."""
        return [child.text or "" for local, child in self._children() if local == name]

    def first_value(self) -> Optional[tuple[str, str]]:
        """Name and text of the first child, whatever its name."""
        for local, child in self._children():
            return local, child.text or ""
        return None


class HCardElement:
    """Read-only accessor over an hCard microformat element."""

    def __init__(self, element: html.HtmlElement):
        self._element = element

    @classmethod
    def from_html(cls, markup: str, base_url: Optional[str] = None) -> "HCardElement":
        """Parse a single HTML fragment and wrap its root element."""
        return cls(html.fragment_fromstring(markup, create_parent=False, base_url=base_url))

    @property
    def element(self) -> html.HtmlElement:
        return self._element

    def tag_name(self) -> str:
        return str(self._element.tag).lower()

    def attr(self, name: str) -> str:
        """Attribute value, or an empty string if absent."""
        return self._element.get(name, "")

    def class_names(self) -> set[str]:
        return set(self._element.get("class", "").split())

    def absolute_url(self, name: str) -> str:
        """Resolve a URL attribute against the document base URL."""
        value = self.attr(name)
        if not value:
            return ""
        return urljoin(self._element.base_url or "", value)

    def value(self) -> str:
        """Effective text value of the element.

        Follows the microformat value rules: an ``abbr`` title wins, then
        the concatenated ``value``-classed descendants, then the element's
        own text with ``type`` sub-elements and ``<del>`` removed and
        ``<br>`` turned into a newline.
        """
        if self.tag_name() == "abbr":
            title = self.attr("title")
            if title:
                return title

        value_parts = [
            HCardElement(child)._own_value() for child in self._outermost_with_class("value")
        ]
        if value_parts:
            return "".join(value_parts).strip()

        return self._own_value()

    def first_value(self, class_name: str) -> Optional[str]:
        for child in self._descendants_with_class(class_name):
            return HCardElement(child).value()
        return None

    def all_values(self, class_name: str) -> list[str]:
        return [HCardElement(child).value() for child in self._descendants_with_class(class_name)]

    def types(self) -> list[str]:
        """Lower-cased values of the ``type`` sub-elements."""
        return [value.lower() for value in self.all_values("type")]

    def _own_value(self) -> str:
        if self.tag_name() == "abbr" and self.attr("title"):
            return self.attr("title")
        parts: list[str] = []
        _visit_text(self._element, parts)
        lines = "".join(parts).split("\n")
        return "\n".join(line.strip() for line in lines).strip()

    def _descendants_with_class(self, class_name: str) -> Iterator[html.HtmlElement]:
        for child in self._element.iterdescendants():
            if isinstance(child.tag, str) and class_name in child.get("class", "").split():
                yield child

    def _outermost_with_class(self, class_name: str) -> Iterator[html.HtmlElement]:
        """Like ``_descendants_with_class`` but skips matches nested in a match."""
        for child in self._descendants_with_class(class_name):
            parent = child.getparent()
            while parent is not None and parent is not self._element:
                if class_name in parent.get("class", "").split():
                    break
                parent = parent.getparent()
            else:
                yield child


def _visit_text(element: html.HtmlElement, parts: list[str]) -> None:
    if element.text:
        parts.append(_WHITESPACE.sub(" ", element.text))
    for child in element:
        if isinstance(child.tag, str):
            tag = child.tag.lower()
            classes = child.get("class", "").split()
            if tag == "br":
                parts.append("\n")
            elif tag != "del" and "type" not in classes:
                _visit_text(child, parts)
        if child.tail:
            parts.append(_WHITESPACE.sub(" ", child.tail))

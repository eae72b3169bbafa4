"""SVG parser: raw markup -> immutable SourceNode tree.

Element tags and attributes lose their XML namespaces; ``xlink:href`` keeps its
prefix so gradient references can tell it apart from SVG 2 ``href``.
Attributes from foreign namespaces (Inkscape, Sodipodi, ...) are dropped.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from vectorflatten.errors import ParseError

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
XML_NS = "http://www.w3.org/XML/1998/namespace"

_KEPT_NAMESPACES = {SVG_NS: "", XLINK_NS: "xlink:", XML_NS: "xml:"}


@dataclass(frozen=True)
class SourceNode:
    """One source element: tag, ordered attributes, children and text."""

    tag: str
    attributes: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    children: tuple[SourceNode, ...] = ()
    text: str = ""

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.attributes.get(name, default)

    def iter(self) -> Iterator[SourceNode]:
        """Pre-order traversal including this node."""
        yield self
        for child in self.children:
            yield from child.iter()


def _strip_ns(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _attr_name(name: str) -> str | None:
    if not name.startswith("{"):
        return name
    ns, local = name[1:].split("}", 1)
    prefix = _KEPT_NAMESPACES.get(ns)
    if prefix is None:
        return None
    return prefix + local


def _build(element: ET.Element) -> SourceNode:
    attrs: dict[str, str] = {}
    for name, value in element.attrib.items():
        key = _attr_name(name)
        if key is not None:
            attrs[key] = value
    return SourceNode(
        tag=_strip_ns(element.tag),
        attributes=MappingProxyType(attrs),
        children=tuple(_build(child) for child in element if isinstance(child.tag, str)),
        text="".join(element.itertext()) if _strip_ns(element.tag) == "style" else (element.text or ""),
    )


def parse_document(svg_text: str | bytes) -> SourceNode:
    """Parse SVG markup and return its ``<svg>`` viewport element.

    Bytes are decoded by the XML parser, honouring the encoding declaration.

    The root element is used when it is an ``<svg>``; otherwise the first
    ``<svg>`` found in document order (SVG embedded in XHTML, for instance).
    Raises ParseError for malformed markup or a document without ``<svg>``.
    """
    if not svg_text or not svg_text.strip():
        raise ParseError("Empty document")
    try:
        root = ET.fromstring(svg_text.strip())
    except ET.ParseError as e:
        raise ParseError(f"Malformed SVG markup: {e}") from e
    except (LookupError, ValueError) as e:
        # Unknown or unsupported encoding declaration.
        raise ParseError(f"Unreadable SVG encoding: {e}") from e

    if _strip_ns(root.tag) != "svg":
        nested = next((el for el in root.iter() if isinstance(el.tag, str) and _strip_ns(el.tag) == "svg"), None)
        if nested is None:
            raise ParseError(f"No <svg> element found (root is <{_strip_ns(root.tag)}>)")
        logger.debug("Using nested <svg> below <%s>", _strip_ns(root.tag))
        root = nested

    return _build(root)

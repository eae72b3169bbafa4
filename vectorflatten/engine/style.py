"""Style cascade: class selectors < presentation attributes < inline style.

Only class selectors are understood. The stylesheet is the aggregated text of
every ``<style>`` element in the document.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from vectorflatten.engine.colors import parse_opacity
from vectorflatten.svg.parser import SourceNode

logger = logging.getLogger(__name__)

StyleSet = dict[str, str]

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)

# Properties a child inherits from its group when it does not set them itself.
INHERITED_PROPERTIES = frozenset({
    "fill",
    "fill-opacity",
    "fill-rule",
    "stroke",
    "stroke-opacity",
    "stroke-width",
    "stroke-linecap",
    "stroke-linejoin",
    "stroke-miterlimit",
    "color",
})


def parse_declarations(text: str) -> StyleSet:
    """Parse ``k: v; k: v`` into a StyleSet. Declarations without ``:`` are ignored."""
    declarations: StyleSet = {}
    for chunk in text.split(";"):
        if ":" not in chunk:
            continue
        key, value = chunk.split(":", 1)
        key = key.strip().lower()
        value = value.replace("!important", "").strip()
        if key and value:
            declarations[key] = value
    return declarations


def parse_stylesheet(css: str) -> dict[str, StyleSet]:
    """Map bare class names to their merged declarations.

    ``.a, .b { fill: red }`` registers the declarations under ``a`` and ``b``.
    Rules for the same class merge in source order.
    """
    rules: dict[str, StyleSet] = {}
    css = _COMMENT_RE.sub("", css)
    for block in css.split("}"):
        if "{" not in block:
            continue
        selectors, body = block.split("{", 1)
        declarations = parse_declarations(body)
        if not declarations:
            continue
        for selector in selectors.split(","):
            name = selector.strip()
            if name.startswith("."):
                name = name[1:]
            if name:
                rules.setdefault(name, {}).update(declarations)
    return rules


def collect_stylesheet(root: SourceNode) -> str:
    """Aggregate the text of every ``<style>`` element, in document order."""
    return "\n".join(node.text for node in root.iter() if node.tag == "style" and node.text)


class StyleResolver:
    """Resolves the effective declarations of one element."""

    def __init__(self, rules: Mapping[str, StyleSet] | None = None) -> None:
        self.rules: Mapping[str, StyleSet] = rules or {}

    @classmethod
    def from_document(cls, root: SourceNode) -> StyleResolver:
        rules = parse_stylesheet(collect_stylesheet(root))
        if rules:
            logger.debug("Stylesheet: %d class rules", len(rules))
        return cls(rules)

    def resolve(self, node: SourceNode) -> StyleSet:
        style: StyleSet = {}
        for class_name in (node.get("class") or "").split():
            declarations = self.rules.get(class_name)
            if declarations:
                style.update(declarations)
        style.update(node.attributes)
        inline = node.get("style")
        if inline:
            style.update(parse_declarations(inline))
        return style


def is_hidden(style: Mapping[str, str]) -> bool:
    """Elements with ``opacity`` 0 or ``display: none`` render nothing, nor do their children."""
    if style.get("display", "").strip().lower() == "none":
        return True
    opacity = style.get("opacity")
    return opacity is not None and parse_opacity(opacity) == 0.0


def inherit(parent: Mapping[str, str], own: Mapping[str, str]) -> StyleSet:
    """Overlay an element's own declarations on the inheritable part of its parent's."""
    merged: StyleSet = {k: v for k, v in parent.items() if k in INHERITED_PROPERTIES}
    for key, value in own.items():
        if value.strip().lower() == "inherit":
            continue
        merged[key] = value
    return merged

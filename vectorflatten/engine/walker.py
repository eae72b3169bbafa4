"""Drawing pass: walk the source tree and emit one VectorPath per visible drawable.

Containers pass a composed transform and their inheritable style to their
children and draw nothing themselves. Drawables are normalized to path data,
flattened, painted and appended to the context. Hidden elements
(``opacity: 0`` or ``display: none``) are dropped together with their subtree.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from vectorflatten.engine import affine
from vectorflatten.engine.colors import (
    color_alpha,
    is_none,
    parse_opacity,
    parse_paint_url,
    to_android_color,
)
from vectorflatten.engine.context import ConversionContext, Paint, TraversalContext, VectorPath
from vectorflatten.engine.path_flattener import flatten_path
from vectorflatten.engine.shapes import SHAPE_TAGS, shape_to_path
from vectorflatten.engine.style import is_hidden
from vectorflatten.engine.transform_parser import parse_transform
from vectorflatten.svg.parser import SourceNode
from vectorflatten.utils.geometry import BoundingBox
from vectorflatten.utils.scanner import parse_length

logger = logging.getLogger(__name__)

CONTAINER_TAGS = frozenset({"svg", "g", "a", "switch"})
DRAWABLE_TAGS = SHAPE_TAGS | {"path"}

# Never drawn; gradients and <style> are read by the collection stages instead.
NON_RENDERED_TAGS = frozenset({
    "defs",
    "style",
    "metadata",
    "title",
    "desc",
    "symbol",
    "clipPath",
    "mask",
    "marker",
    "pattern",
    "linearGradient",
    "radialGradient",
    "filter",
    "script",
})

LINE_CAPS = frozenset({"butt", "round", "square"})
LINE_JOINS = frozenset({"miter", "round", "bevel"})


class DocumentWalker:
    """Visits every element of ``ctx.root`` once and fills ``ctx.paths``."""

    def __init__(self, ctx: ConversionContext) -> None:
        self.ctx = ctx
        self.config = ctx.config

    def walk(self) -> list[VectorPath]:
        tx, ty = self.ctx.viewport.origin_translation
        start = TraversalContext(transform=affine.translation(tx, ty))
        self._visit(self.ctx.root, start, is_root=True)
        return self.ctx.paths

    def _visit(self, node: SourceNode, parent: TraversalContext, is_root: bool = False) -> None:
        tag = node.tag
        if tag in NON_RENDERED_TAGS:
            return
        if tag not in CONTAINER_TAGS and tag not in DRAWABLE_TAGS:
            logger.debug("Unsupported element <%s> skipped", tag)
            return

        own = self.ctx.styles.resolve(node)
        if is_hidden(own):
            logger.debug("Hidden <%s id=%r> skipped with its subtree", tag, node.get("id"))
            return

        local = parse_transform(own.get("transform"))
        if tag == "svg" and not is_root:
            # Nested viewport: only its position is honoured.
            offset = affine.translation(
                parse_length(node.get("x"), on_warning=self.ctx.warn),
                parse_length(node.get("y"), on_warning=self.ctx.warn),
            )
            local = affine.compose(offset, local)
        here = parent.descend(own, local)

        if tag in CONTAINER_TAGS:
            for child in node.children:
                self._visit(child, here)
        else:
            self._draw(node, here)

    def _draw(self, node: SourceNode, here: TraversalContext) -> None:
        if node.tag == "path":
            d = node.get("d") or ""
        else:
            d = shape_to_path(node.tag, node.attributes, self.ctx.warn) or ""

        flattened = flatten_path(d, here.transform, self.config.precision, self.ctx.warn)
        if flattened.is_empty:
            logger.debug("<%s id=%r> has no path data; skipped", node.tag, node.get("id"))
            return

        style = here.style
        fill_alpha = here.opacity * parse_opacity(style.get("fill-opacity"))
        stroke_alpha = here.opacity * parse_opacity(style.get("stroke-opacity"))

        fill = None
        if fill_alpha > 0:
            fill = self._paint(style.get("fill", self.config.default_fill), style, flattened.bbox)

        stroke = None
        stroke_width = parse_length(style.get("stroke-width"), 1.0, self.ctx.warn)
        stroke_width *= here.transform.scale_factor()
        if stroke_alpha > 0 and stroke_width > 0:
            stroke = self._paint(style.get("stroke"), style, flattened.bbox)

        if fill is None and stroke is None:
            logger.debug("<%s id=%r> paints nothing; skipped", node.tag, node.get("id"))
            return

        path = VectorPath(
            path_data=flattened.path_data,
            name=node.get("id") if self.config.emit_names else None,
            fill=fill,
            fill_alpha=fill_alpha,
            fill_type="evenOdd" if style.get("fill-rule", "").strip() == "evenodd" else None,
        )
        if stroke is not None:
            path.stroke = stroke
            path.stroke_width = stroke_width
            path.stroke_alpha = stroke_alpha
            path.stroke_line_cap = _keyword(style.get("stroke-linecap"), LINE_CAPS, "butt")
            path.stroke_line_join = _keyword(style.get("stroke-linejoin"), LINE_JOINS, "miter")
            if style.get("stroke-miterlimit"):
                path.stroke_miter_limit = parse_length(style.get("stroke-miterlimit"), 4.0, self.ctx.warn)
        self.ctx.paths.append(path)

    def _paint(self, value: str | None, style: Mapping[str, str], bbox: BoundingBox) -> Paint | None:
        """Resolve a fill/stroke value; None when it paints nothing."""
        if is_none(value):
            return None
        value = value.strip()
        if value.lower() == "currentcolor":
            value = style.get("color", self.config.default_fill)
            if value.strip().lower() == "currentcolor":
                value = self.config.default_fill

        url = parse_paint_url(value)
        if url is not None:
            gradient_id, fallback = url
            gradient = self.ctx.gradients.resolve_for(gradient_id, bbox, self.ctx.viewport.origin_translation)
            if gradient is None:
                self.ctx.warn(f"Paint server {gradient_id!r} not found")
                if fallback and parse_paint_url(fallback) is None:
                    return self._paint(fallback, style, bbox)
                return None
            if not gradient.stops:
                return None
            if len(gradient.stops) == 1:
                return Paint(color=gradient.stops[0].argb)
            return Paint(gradient=gradient)

        if color_alpha(value) == 0:
            return None
        return Paint(color=to_android_color(value))


def _keyword(value: str | None, allowed: frozenset[str], default: str) -> str:
    if value is None:
        return default
    value = value.strip().lower()
    return value if value in allowed else default

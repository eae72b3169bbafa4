"""Gradient definitions: collection, href inheritance and coordinate resolution.

Gradients are collected from anywhere in the document. A gradient may inherit
stops, coordinates and units from the gradient its ``href``/``xlink:href``
names; the chain is followed until it ends, breaks or loops.

Coordinates resolve against the bounding box of the flattened element being
painted:

- ``"25%"`` is a fraction of the bounding-box width (x) or height (y), offset
  by the box minimum, whatever the units;
- a bare number under ``objectBoundingBox`` is the same fraction;
- a bare number under ``userSpaceOnUse`` is an absolute coordinate shifted by
  the viewport-origin translation, so it lands in the space of the flattened
  path data.

Radii use the bounding-box diagonal as their basis.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from vectorflatten.engine.colors import is_none, parse_opacity, to_android_color
from vectorflatten.engine.style import StyleResolver
from vectorflatten.svg.parser import SourceNode
from vectorflatten.utils.geometry import BoundingBox
from vectorflatten.utils.scanner import finite_number, scan_number

logger = logging.getLogger(__name__)

GRADIENT_TAGS = {"linearGradient": "linear", "radialGradient": "radial"}

OBJECT_BOUNDING_BOX = "objectBoundingBox"
USER_SPACE_ON_USE = "userSpaceOnUse"

COORDINATE_FIELDS = {
    "linear": ("x1", "y1", "x2", "y2"),
    "radial": ("cx", "cy", "r"),
}

DEFAULT_COORDINATES = {
    "x1": "0%",
    "y1": "0%",
    "x2": "100%",
    "y2": "0%",
    "cx": "50%",
    "cy": "50%",
    "r": "50%",
}

_X_FIELDS = frozenset({"x1", "x2", "cx"})
_Y_FIELDS = frozenset({"y1", "y2", "cy"})

# SVG spreadMethod -> android:tileMode
TILE_MODES = {"pad": "clamp", "reflect": "mirror", "repeat": "repeat"}

# Stop colour for none/transparent
TRANSPARENT = "#00000000"


@dataclass(frozen=True)
class GradientStop:
    offset: float
    color: str
    opacity: float = 1.0

    @property
    def argb(self) -> str:
        return to_android_color(self.color, self.opacity)


@dataclass
class GradientDef:
    id: str
    kind: str
    stops: list[GradientStop] = field(default_factory=list)
    coordinates: dict[str, str] = field(default_factory=dict)
    units: str | None = None
    spread_method: str | None = None
    href: str | None = None

    @property
    def effective_units(self) -> str:
        return self.units or OBJECT_BOUNDING_BOX


@dataclass(frozen=True)
class ResolvedGradient:
    """Absolute gradient geometry ready for the target document."""

    kind: str
    coordinates: dict[str, float]
    stops: tuple[GradientStop, ...]
    tile_mode: str | None = None


def parse_offset(value: str | None) -> float:
    if value is None:
        return 0.0
    text = value.strip()
    try:
        offset = float(text[:-1]) / 100 if text.endswith("%") else float(text)
    except ValueError:
        return 0.0
    return max(0.0, min(1.0, offset))


def _stop_color(style: dict[str, str]) -> str:
    color = style.get("stop-color", "#000000").strip()
    if color.lower() == "currentcolor":
        color = style.get("color", "#000000").strip()
    if is_none(color):
        return TRANSPARENT
    return color


def _parse_stop(node: SourceNode, resolver: StyleResolver) -> GradientStop:
    style = resolver.resolve(node)
    return GradientStop(
        offset=parse_offset(style.get("offset")),
        color=_stop_color(style),
        opacity=parse_opacity(style.get("stop-opacity")),
    )


def _href(node: SourceNode) -> str | None:
    ref = node.get("href") or node.get("xlink:href")
    if not ref:
        return None
    ref = ref.strip()
    return ref[1:] if ref.startswith("#") else ref


class GradientRegistry:
    """Gradient definitions of one document, keyed by id."""

    def __init__(self, on_warning: Callable[[str], None] | None = None) -> None:
        self.definitions: dict[str, GradientDef] = {}
        self.on_warning = on_warning
        self._resolved: dict[str, GradientDef] = {}

    def __len__(self) -> int:
        return len(self.definitions)

    def __contains__(self, gradient_id: str) -> bool:
        return gradient_id in self.definitions

    def _warn(self, message: str) -> None:
        if self.on_warning is not None:
            self.on_warning(message)
        else:
            logger.warning(message)

    def collect(self, root: SourceNode, resolver: StyleResolver | None = None) -> None:
        """Register every gradient element under ``root`` in document order."""
        resolver = resolver or StyleResolver()
        for node in root.iter():
            kind = GRADIENT_TAGS.get(node.tag)
            if kind is None:
                continue
            gradient_id = node.get("id")
            if not gradient_id:
                logger.debug("Gradient without id ignored")
                continue
            coordinates = {
                name: node.attributes[name]
                for name in COORDINATE_FIELDS[kind]
                if node.attributes.get(name, "").strip()
            }
            self.definitions[gradient_id] = GradientDef(
                id=gradient_id,
                kind=kind,
                stops=[_parse_stop(child, resolver) for child in node.children if child.tag == "stop"],
                coordinates=coordinates,
                units=node.get("gradientUnits"),
                spread_method=node.get("spreadMethod"),
                href=_href(node),
            )
        self._resolved.clear()
        logger.debug("Collected %d gradients", len(self))

    def resolve(self, gradient_id: str) -> GradientDef | None:
        """Definition of ``gradient_id`` with its href chain merged in, or None if unknown."""
        if gradient_id in self._resolved:
            return self._resolved[gradient_id]
        own = self.definitions.get(gradient_id)
        if own is None:
            return None

        chain = [own]
        seen = {own.id}
        ref = own.href
        while ref:
            if ref in seen:
                self._warn(f"Gradient {gradient_id!r}: cyclic href to {ref!r} ignored")
                break
            parent = self.definitions.get(ref)
            if parent is None:
                self._warn(f"Gradient {gradient_id!r}: href to unknown gradient {ref!r} ignored")
                break
            chain.append(parent)
            seen.add(ref)
            ref = parent.href

        merged = GradientDef(id=own.id, kind=own.kind)
        for node in reversed(chain):
            if node.stops:
                merged.stops = list(node.stops)
            merged.coordinates.update(node.coordinates)
            if node.units:
                merged.units = node.units
            if node.spread_method:
                merged.spread_method = node.spread_method
        self._resolved[gradient_id] = merged
        return merged

    def resolve_for(
        self,
        gradient_id: str,
        bbox: BoundingBox,
        viewport_origin: tuple[float, float] = (0.0, 0.0),
    ) -> ResolvedGradient | None:
        """Absolute coordinates of ``gradient_id`` for an element with ``bbox``."""
        gradient = self.resolve(gradient_id)
        if gradient is None:
            return None
        coordinates = {
            name: resolve_coordinate(
                name,
                gradient.coordinates.get(name, DEFAULT_COORDINATES[name]),
                gradient.effective_units,
                bbox,
                viewport_origin,
            )
            for name in COORDINATE_FIELDS[gradient.kind]
        }
        stops = tuple(sorted(gradient.stops, key=lambda s: s.offset))
        tile_mode = TILE_MODES.get((gradient.spread_method or "").strip())
        return ResolvedGradient(gradient.kind, coordinates, stops, tile_mode)


def resolve_coordinate(
    name: str,
    raw: str,
    units: str,
    bbox: BoundingBox,
    viewport_origin: tuple[float, float] = (0.0, 0.0),
) -> float:
    """Resolve one gradient coordinate; see the module docstring for the rules."""
    if bbox.is_empty:
        origin_x = origin_y = 0.0
    else:
        origin_x, origin_y = bbox.min_x, bbox.min_y

    if name in _X_FIELDS:
        offset, basis, shift = origin_x, bbox.width, viewport_origin[0]
    elif name in _Y_FIELDS:
        offset, basis, shift = origin_y, bbox.height, viewport_origin[1]
    else:
        offset, basis, shift = 0.0, bbox.diagonal, 0.0

    text = raw.strip()
    end = scan_number(text, 0)
    if end == 0 or finite_number(text[:end]) is None:
        text = DEFAULT_COORDINATES[name]
        end = scan_number(text, 0)
    value = float(text[:end])

    if text[end:].strip() == "%":
        return offset + value / 100 * basis
    if units == USER_SPACE_ON_USE:
        return value + shift
    return offset + value * basis

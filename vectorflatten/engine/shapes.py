"""Basic shapes -> equivalent path data, in the shape's own coordinate space."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping

from vectorflatten.utils.scanner import parse_length, parse_number_list

logger = logging.getLogger(__name__)

SHAPE_TAGS = frozenset({"rect", "circle", "ellipse", "line", "polyline", "polygon"})

Warn = Callable[[str], None]


def _n(value: float) -> str:
    """Exact, compact number text for intermediate path data."""
    if not math.isfinite(value):
        raise OverflowError(f"coordinate {value!r} is not finite")
    if value == int(value):
        return str(int(value))
    return repr(value)


def rect_to_path(attrs: Mapping[str, str], on_warning: Warn | None = None) -> str | None:
    x = parse_length(attrs.get("x"), on_warning=on_warning)
    y = parse_length(attrs.get("y"), on_warning=on_warning)
    w = parse_length(attrs.get("width"), on_warning=on_warning)
    h = parse_length(attrs.get("height"), on_warning=on_warning)
    if w <= 0 or h <= 0:
        return None

    rx_attr, ry_attr = attrs.get("rx"), attrs.get("ry")
    rx = parse_length(rx_attr, on_warning=on_warning) if rx_attr is not None else None
    ry = parse_length(ry_attr, on_warning=on_warning) if ry_attr is not None else None
    if rx is None and ry is None:
        rx = ry = 0.0
    elif rx is None:
        rx = ry
    elif ry is None:
        ry = rx
    rx = min(max(rx, 0.0), w / 2)
    ry = min(max(ry, 0.0), h / 2)

    if rx == 0 or ry == 0:
        return f"M{_n(x)},{_n(y)} h{_n(w)} v{_n(h)} h{_n(-w)} z"

    arc = f"A{_n(rx)},{_n(ry)} 0 0,1"
    return (
        f"M{_n(x + rx)},{_n(y)} "
        f"H{_n(x + w - rx)} {arc} {_n(x + w)},{_n(y + ry)} "
        f"V{_n(y + h - ry)} {arc} {_n(x + w - rx)},{_n(y + h)} "
        f"H{_n(x + rx)} {arc} {_n(x)},{_n(y + h - ry)} "
        f"V{_n(y + ry)} {arc} {_n(x + rx)},{_n(y)} Z"
    )


def _ellipse(cx: float, cy: float, rx: float, ry: float) -> str:
    return (
        f"M{_n(cx - rx)},{_n(cy)} "
        f"a{_n(rx)},{_n(ry)} 0 1,0 {_n(2 * rx)},0 "
        f"a{_n(rx)},{_n(ry)} 0 1,0 {_n(-2 * rx)},0 Z"
    )


def circle_to_path(attrs: Mapping[str, str], on_warning: Warn | None = None) -> str | None:
    r = parse_length(attrs.get("r"), on_warning=on_warning)
    if r <= 0:
        return None
    cx = parse_length(attrs.get("cx"), on_warning=on_warning)
    cy = parse_length(attrs.get("cy"), on_warning=on_warning)
    return _ellipse(cx, cy, r, r)


def ellipse_to_path(attrs: Mapping[str, str], on_warning: Warn | None = None) -> str | None:
    rx = parse_length(attrs.get("rx"), on_warning=on_warning)
    ry = parse_length(attrs.get("ry"), on_warning=on_warning)
    if rx <= 0 or ry <= 0:
        return None
    cx = parse_length(attrs.get("cx"), on_warning=on_warning)
    cy = parse_length(attrs.get("cy"), on_warning=on_warning)
    return _ellipse(cx, cy, rx, ry)


def line_to_path(attrs: Mapping[str, str], on_warning: Warn | None = None) -> str:
    x1, y1, x2, y2 = (
        parse_length(attrs.get(name), on_warning=on_warning) for name in ("x1", "y1", "x2", "y2")
    )
    return f"M{_n(x1)},{_n(y1)} L{_n(x2)},{_n(y2)}"


def _points_to_path(
    attrs: Mapping[str, str],
    closed: bool,
    on_warning: Warn | None,
) -> str | None:
    values = parse_number_list(attrs.get("points"), on_warning)
    if len(values) % 2:
        _warn(on_warning, f"Odd coordinate count ({len(values)}) in points list; last value dropped")
        values = values[:-1]
    if not values:
        return None
    pairs = [f"{_n(values[i])},{_n(values[i + 1])}" for i in range(0, len(values), 2)]
    d = "M" + pairs[0] + "".join(f" L{p}" for p in pairs[1:])
    return d + " Z" if closed else d


def _warn(on_warning: Warn | None, message: str) -> None:
    if on_warning is not None:
        on_warning(message)
    else:
        logger.warning(message)


def shape_to_path(
    tag: str,
    attrs: Mapping[str, str],
    on_warning: Warn | None = None,
) -> str | None:
    """Path data for a basic shape, or None when the shape renders nothing.

    A shape whose geometry overflows the float range is dropped with a warning.
    """
    try:
        if tag == "rect":
            return rect_to_path(attrs, on_warning)
        if tag == "circle":
            return circle_to_path(attrs, on_warning)
        if tag == "ellipse":
            return ellipse_to_path(attrs, on_warning)
        if tag == "line":
            return line_to_path(attrs, on_warning)
        if tag in ("polyline", "polygon"):
            return _points_to_path(attrs, tag == "polygon", on_warning)
    except OverflowError as e:
        _warn(on_warning, f"<{tag}> skipped: {e}")
    return None

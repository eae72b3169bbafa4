"""VectorDrawable writer.

Produces a ``<vector>`` element with one ``<path>`` child per VectorPath, in
drawing order. Gradient paints become ``<aapt:attr>`` blocks nested in the
path, which is the only way a VectorDrawable can carry them inline.
"""

from __future__ import annotations

from xml.sax.saxutils import quoteattr

from vectorflatten.engine.context import Paint, VectorPath
from vectorflatten.engine.gradients import ResolvedGradient
from vectorflatten.svg.viewport import Viewport
from vectorflatten.utils.geometry import format_number

ANDROID_NS = "http://schemas.android.com/apk/res/android"
AAPT_NS = "http://schemas.android.com/aapt"

INDENT = "    "

_GRADIENT_ATTRIBUTES = {
    "linear": (("startX", "x1"), ("startY", "y1"), ("endX", "x2"), ("endY", "y2")),
    "radial": (("centerX", "cx"), ("centerY", "cy"), ("gradientRadius", "r")),
}


def _attr(name: str, value: str) -> str:
    return f"{name}={quoteattr(value)}"


def _tag(indent: int, name: str, attributes: list[tuple[str, str]], closing: str) -> list[str]:
    """Opening tag with one attribute per line, ending in ``closing`` (``>`` or ``/>``)."""
    pad = INDENT * indent
    if not attributes:
        return [f"{pad}<{name}{closing}"]
    lines = [f"{pad}<{name}"]
    for i, (key, value) in enumerate(attributes):
        tail = closing if i == len(attributes) - 1 else ""
        lines.append(f"{pad}{INDENT}{_attr(key, value)}{tail}")
    return lines


def _gradient_block(target: str, gradient: ResolvedGradient, indent: int, precision: int) -> list[str]:
    attributes = [("android:type", gradient.kind)]
    for android_name, coordinate in _GRADIENT_ATTRIBUTES[gradient.kind]:
        attributes.append((f"android:{android_name}", format_number(gradient.coordinates[coordinate], precision)))
    if gradient.tile_mode:
        attributes.append(("android:tileMode", gradient.tile_mode))

    lines = _tag(indent, "aapt:attr", [("name", f"android:{target}")], ">")
    lines += _tag(indent + 1, "gradient", attributes, ">")
    for stop in gradient.stops:
        lines += _tag(
            indent + 2,
            "item",
            [("android:offset", format_number(stop.offset, precision)), ("android:color", stop.argb)],
            "/>",
        )
    lines.append(f"{INDENT * (indent + 1)}</gradient>")
    lines.append(f"{INDENT * indent}</aapt:attr>")
    return lines


def _alpha(value: float) -> str | None:
    return None if value >= 1.0 else format_number(value, 3)


def _path_lines(path: VectorPath, precision: int) -> list[str]:
    attributes: list[tuple[str, str]] = []
    if path.name:
        attributes.append(("android:name", path.name))
    attributes.append(("android:pathData", path.path_data))

    gradients: list[tuple[str, Paint]] = []
    if path.fill is not None:
        if path.fill.is_gradient:
            gradients.append(("fillColor", path.fill))
        else:
            attributes.append(("android:fillColor", path.fill.color))
        if (alpha := _alpha(path.fill_alpha)) is not None:
            attributes.append(("android:fillAlpha", alpha))
        if path.fill_type:
            attributes.append(("android:fillType", path.fill_type))

    if path.stroke is not None:
        if path.stroke.is_gradient:
            gradients.append(("strokeColor", path.stroke))
        else:
            attributes.append(("android:strokeColor", path.stroke.color))
        attributes.append(("android:strokeWidth", format_number(path.stroke_width, precision)))
        if (alpha := _alpha(path.stroke_alpha)) is not None:
            attributes.append(("android:strokeAlpha", alpha))
        if path.stroke_line_cap and path.stroke_line_cap != "butt":
            attributes.append(("android:strokeLineCap", path.stroke_line_cap))
        if path.stroke_line_join and path.stroke_line_join != "miter":
            attributes.append(("android:strokeLineJoin", path.stroke_line_join))
        if path.stroke_miter_limit is not None:
            attributes.append(("android:strokeMiterLimit", format_number(path.stroke_miter_limit, precision)))

    if not gradients:
        return _tag(1, "path", attributes, "/>")

    lines = _tag(1, "path", attributes, ">")
    for target, paint in gradients:
        lines += _gradient_block(target, paint.gradient, 2, precision)
    lines.append(f"{INDENT}</path>")
    return lines


def serialize_vector(viewport: Viewport, paths: list[VectorPath], precision: int = 3) -> str:
    """Render the target document. No XML prolog is written."""
    attributes = [("xmlns:android", ANDROID_NS)]
    if any(path.has_gradient for path in paths):
        attributes.append(("xmlns:aapt", AAPT_NS))
    attributes += [
        ("android:width", f"{format_number(viewport.width_dp, precision)}dp"),
        ("android:height", f"{format_number(viewport.height_dp, precision)}dp"),
        ("android:viewportWidth", format_number(viewport.width, precision)),
        ("android:viewportHeight", format_number(viewport.height, precision)),
    ]

    lines = _tag(0, "vector", attributes, ">")
    for path in paths:
        lines += _path_lines(path, precision)
    lines.append("</vector>")
    return "\n".join(lines) + "\n"

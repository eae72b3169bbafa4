"""Viewport of the root <svg> element."""

from __future__ import annotations

from dataclasses import dataclass

from vectorflatten.svg.parser import SourceNode
from vectorflatten.utils.scanner import parse_length, parse_number_list


@dataclass(frozen=True)
class Viewport:
    """viewBox rectangle plus the declared display size (dp)."""

    x: float
    y: float
    width: float
    height: float
    width_dp: float
    height_dp: float

    @property
    def origin_translation(self) -> tuple[float, float]:
        """Translation that moves the viewBox origin to (0, 0)."""
        return (-self.x, -self.y)


def _declared_size(value: str | None) -> float | None:
    if value is None or value.strip().endswith("%"):
        return None
    size = parse_length(value, default=0.0)
    return size if size > 0 else None


def read_viewport(root: SourceNode, default_size: float = 24.0) -> Viewport:
    """Viewport from ``viewBox``, falling back to width/height, then ``default_size``.

    The display size defaults to the viewBox size; a unit suffix on
    width/height is ignored and percentages count as undeclared.
    """
    width = _declared_size(root.get("width"))
    height = _declared_size(root.get("height"))

    box = parse_number_list(root.get("viewBox"))
    if len(box) == 4 and box[2] > 0 and box[3] > 0:
        x, y, vw, vh = box
    else:
        x, y = 0.0, 0.0
        vw = width or default_size
        vh = height or default_size

    return Viewport(
        x=x,
        y=y,
        width=vw,
        height=vh,
        width_dp=width or vw,
        height_dp=height or vh,
    )

"""2D affine transforms.

Coefficients follow the SVG ``matrix(a b c d e f)`` layout::

    x' = a*x + c*y + e
    y' = b*x + d*y + f
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class AffineTransform:
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def from_matrix(cls, m: NDArray[np.float64]) -> AffineTransform:
        return cls(
            float(m[0, 0]), float(m[1, 0]),
            float(m[0, 1]), float(m[1, 1]),
            float(m[0, 2]), float(m[1, 2]),
        )

    def to_matrix(self) -> NDArray[np.float64]:
        """Homogeneous 3x3 matrix acting on column vectors."""
        return np.array(
            [
                [self.a, self.c, self.e],
                [self.b, self.d, self.f],
                [0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )

    @property
    def coefficients(self) -> tuple[float, float, float, float, float, float]:
        return (self.a, self.b, self.c, self.d, self.e, self.f)

    @property
    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    @property
    def is_identity(self) -> bool:
        return self == IDENTITY

    def multiply(self, other: AffineTransform) -> AffineTransform:
        """Return ``self · other``: ``other`` is applied to points first."""
        return AffineTransform.from_matrix(self.to_matrix() @ other.to_matrix())

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return (
            x * self.a + y * self.c + self.e,
            x * self.b + y * self.d + self.f,
        )

    def apply_to_arc(self, rx: float, ry: float, x_axis_rotation: float) -> tuple[float, float, float]:
        """Map elliptical-arc radii and rotation through the linear part.

        Both ellipse axes are rotated by ``x_axis_rotation`` degrees, pushed
        through the 2x2 linear part (translation does not apply to radii) and
        measured. Exact for similarity transforms only; under non-uniform
        scale combined with rotation the transformed axes are not the axes of
        the resulting ellipse.
        """
        rad = math.radians(x_axis_rotation)
        cos_r, sin_r = math.cos(rad), math.sin(rad)
        axes = np.array(
            [
                [rx * cos_r, -ry * sin_r],
                [rx * sin_r, ry * cos_r],
            ],
            dtype=np.float64,
        )
        linear = np.array([[self.a, self.c], [self.b, self.d]], dtype=np.float64)
        mapped = linear @ axes
        new_rx, new_ry = np.hypot(mapped[0], mapped[1])
        rotation = math.degrees(math.atan2(mapped[1, 0], mapped[0, 0]))
        return float(new_rx), float(new_ry), rotation

    def scale_factor(self) -> float:
        """Uniform scale estimate used for stroke widths."""
        return math.sqrt(abs(self.determinant))


IDENTITY = AffineTransform()


def compose(parent: AffineTransform, child: AffineTransform) -> AffineTransform:
    """Transform equivalent to applying ``child`` and then ``parent``."""
    return parent.multiply(child)


def translation(tx: float, ty: float = 0.0) -> AffineTransform:
    return AffineTransform(e=tx, f=ty)


def scaling(sx: float, sy: float | None = None) -> AffineTransform:
    return AffineTransform(a=sx, d=sx if sy is None else sy)


def rotation(angle_deg: float, cx: float = 0.0, cy: float = 0.0) -> AffineTransform:
    rad = math.radians(angle_deg)
    cos_a, sin_a = math.cos(rad), math.sin(rad)
    rot = AffineTransform(cos_a, sin_a, -sin_a, cos_a)
    if cx == 0 and cy == 0:
        return rot
    return translation(cx, cy).multiply(rot).multiply(translation(-cx, -cy))


def skew_x(angle_deg: float) -> AffineTransform:
    return AffineTransform(c=math.tan(math.radians(angle_deg)))


def skew_y(angle_deg: float) -> AffineTransform:
    return AffineTransform(b=math.tan(math.radians(angle_deg)))

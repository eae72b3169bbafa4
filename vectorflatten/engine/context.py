"""ConversionContext — the per-conversion state flowing through all stages.

Collection stages fill ``styles`` and ``gradients``; the drawing stage fills
``paths``. A context belongs to exactly one conversion and is never reused.
TraversalContext is the immutable value threaded down the element tree.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from vectorflatten.engine.affine import AffineTransform, compose
from vectorflatten.engine.colors import parse_opacity
from vectorflatten.engine.config import ConverterConfig
from vectorflatten.engine.gradients import GradientRegistry, ResolvedGradient
from vectorflatten.engine.style import StyleResolver, inherit
from vectorflatten.errors import MalformedGeometryWarning
from vectorflatten.svg.parser import SourceNode
from vectorflatten.svg.viewport import Viewport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Paint:
    """A solid ``#AARRGGBB`` colour or a resolved gradient."""

    color: str | None = None
    gradient: ResolvedGradient | None = None

    @property
    def is_gradient(self) -> bool:
        return self.gradient is not None


@dataclass
class VectorPath:
    """One <path> of the target document."""

    path_data: str
    name: str | None = None
    fill: Paint | None = None
    fill_alpha: float = 1.0
    fill_type: str | None = None
    stroke: Paint | None = None
    stroke_width: float = 0.0
    stroke_alpha: float = 1.0
    stroke_line_cap: str | None = None
    stroke_line_join: str | None = None
    stroke_miter_limit: float | None = None

    @property
    def has_gradient(self) -> bool:
        return any(p is not None and p.is_gradient for p in (self.fill, self.stroke))


@dataclass(frozen=True)
class TraversalContext:
    """Accumulated transform, inherited style and opacity at one tree depth."""

    transform: AffineTransform = field(default_factory=AffineTransform)
    style: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    opacity: float = 1.0

    def descend(self, own_style: Mapping[str, str], local: AffineTransform) -> TraversalContext:
        """Context for an element with ``own_style`` and ``local`` transform below this one."""
        return TraversalContext(
            transform=compose(self.transform, local),
            style=MappingProxyType(inherit(self.style, own_style)),
            opacity=self.opacity * parse_opacity(own_style.get("opacity")),
        )


@dataclass
class ConversionContext:
    """Shared state of one conversion."""

    root: SourceNode
    viewport: Viewport
    config: ConverterConfig = field(default_factory=ConverterConfig)
    styles: StyleResolver = field(default_factory=StyleResolver)
    gradients: GradientRegistry = field(init=False)
    paths: list[VectorPath] = field(default_factory=list)
    warnings: list[MalformedGeometryWarning] = field(default_factory=list)
    completed_stages: set[str] = field(default_factory=set)

    def __post_init__(self) -> None:
        self.gradients = GradientRegistry(on_warning=self.warn)

    def warn(self, message: str) -> None:
        """Record a non-fatal geometry problem and keep going."""
        self.warnings.append(MalformedGeometryWarning(message))
        logger.warning(message)


@dataclass
class ConversionResult:
    """Target document plus what happened while producing it."""

    xml: str
    path_count: int = 0
    gradient_count: int = 0
    warnings: list[str] = field(default_factory=list)
    completed_stages: list[str] = field(default_factory=list)

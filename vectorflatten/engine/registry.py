"""Stage registry — each conversion stage is a function registered via decorator.

Usage:
    @stage(id="S1.01", layer=Layer.DRAWING, dependencies=["S0.01", "S0.02"])
    def draw(ctx: ConversionContext) -> None:
        DocumentWalker(ctx).walk()

Collection stages (layer 0) read the whole document once; drawing stages
(layer 1) consume what they collected.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from vectorflatten.engine.context import ConversionContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    COLLECTION = 0
    DRAWING = 1


@dataclass
class StageSpec:
    id: str
    layer: Layer
    fn: Callable[["ConversionContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class StageRegistry:
    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (%s)", spec.id, spec.layer.name)

    def get(self, stage_id: str) -> StageSpec:
        return self._stages[stage_id]

    def all(self) -> list[StageSpec]:
        return sorted(self._stages.values(), key=lambda s: (s.layer, s.id))

    def resolve_order(self) -> list[StageSpec]:
        """Topological order of all stages; ties break on id."""
        pool = self._stages
        for spec in pool.values():
            unknown = [dep for dep in spec.dependencies if dep not in pool]
            if unknown:
                raise ValueError(f"Stage {spec.id} depends on unknown stages: {unknown}")

        # Kahn's algorithm
        in_degree = {sid: len(spec.dependencies) for sid, spec in pool.items()}
        queue = sorted(sid for sid, d in in_degree.items() if d == 0)
        ordered: list[StageSpec] = []

        while queue:
            sid = queue.pop(0)
            ordered.append(pool[sid])
            for other_id, other in pool.items():
                if sid in other.dependencies:
                    in_degree[other_id] -= 1
                    if in_degree[other_id] == 0:
                        queue.append(other_id)
                        queue.sort()

        if len(ordered) != len(pool):
            missing = set(pool) - {s.id for s in ordered}
            raise ValueError(f"Circular dependency detected among: {missing}")
        return ordered

    @property
    def count(self) -> int:
        return len(self._stages)


# Module-level singleton
_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a stage function."""

    def decorator(fn: Callable[["ConversionContext"], None]):
        _registry.register(
            StageSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=dependencies or [],
                description=description,
            )
        )
        return fn

    return decorator

"""S1.01 — Drawing pass: flatten every visible drawable into ctx.paths."""

from __future__ import annotations

from vectorflatten.engine.context import ConversionContext
from vectorflatten.engine.registry import Layer, stage
from vectorflatten.engine.walker import DocumentWalker


@stage(
    id="S1.01",
    layer=Layer.DRAWING,
    dependencies=["S0.01", "S0.02"],
    description="Flatten drawables into target paths",
)
def draw(ctx: ConversionContext) -> None:
    DocumentWalker(ctx).walk()

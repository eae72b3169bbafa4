"""S0.02 — Gradient collection.

Registers every linear/radial gradient by id, wherever it sits in the
document. Stop colours may come from the stylesheet, so this runs after S0.01.
"""

from __future__ import annotations

from vectorflatten.engine.context import ConversionContext
from vectorflatten.engine.registry import Layer, stage


@stage(
    id="S0.02",
    layer=Layer.COLLECTION,
    dependencies=["S0.01"],
    description="Collect gradient definitions",
)
def gradient_collection(ctx: ConversionContext) -> None:
    ctx.gradients.collect(ctx.root, ctx.styles)

"""S0.01 — Stylesheet collection.

Aggregates every <style> element and indexes its class rules, so the drawing
pass can resolve class < attribute < inline style per element.
"""

from __future__ import annotations

from vectorflatten.engine.context import ConversionContext
from vectorflatten.engine.registry import Layer, stage
from vectorflatten.engine.style import StyleResolver


@stage(
    id="S0.01",
    layer=Layer.COLLECTION,
    description="Collect <style> class rules",
)
def stylesheet_collection(ctx: ConversionContext) -> None:
    ctx.styles = StyleResolver.from_document(ctx.root)

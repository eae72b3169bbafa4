"""Pipeline orchestrator — runs conversion stages in dependency order."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from vectorflatten.engine.config import ConverterConfig
from vectorflatten.engine.context import ConversionContext, ConversionResult
from vectorflatten.engine.registry import StageRegistry, get_registry
from vectorflatten.svg.parser import parse_document
from vectorflatten.svg.serializer import serialize_vector
from vectorflatten.svg.viewport import read_viewport

logger = logging.getLogger(__name__)

STAGE_PACKAGES = ("vectorflatten.engine.layer0", "vectorflatten.engine.layer1")


def load_stages() -> None:
    """Import every stage module so the @stage decorators fire. Safe to call repeatedly."""
    for package_name in STAGE_PACKAGES:
        package = importlib.import_module(package_name)
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package_name}.{module_name}")


class Pipeline:
    """Runs every registered stage over one ConversionContext."""

    def __init__(
        self,
        registry: StageRegistry | None = None,
        config: ConverterConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or ConverterConfig()

    def run(self, ctx: ConversionContext) -> ConversionContext:
        start = time.perf_counter()
        ordered = self.registry.resolve_order()

        for spec in ordered:
            t0 = time.perf_counter()
            spec.fn(ctx)
            ctx.completed_stages.add(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s completed in %.1fms", spec.id, elapsed)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d stages, %d paths, %d warnings in %.0fms",
            len(ordered),
            len(ctx.paths),
            len(ctx.warnings),
            total,
        )
        return ctx

    def convert(self, svg_text: str | bytes) -> ConversionResult:
        """Parse, run all stages and serialize. Raises ParseError on unusable input."""
        root = parse_document(svg_text)
        viewport = read_viewport(root, self.config.default_viewport_size)
        ctx = ConversionContext(root=root, viewport=viewport, config=self.config)
        self.run(ctx)

        xml = serialize_vector(viewport, ctx.paths, self.config.precision)
        return ConversionResult(
            xml=xml,
            path_count=len(ctx.paths),
            gradient_count=sum(1 for p in ctx.paths if p.has_gradient),
            warnings=[str(w) for w in ctx.warnings],
            completed_stages=sorted(ctx.completed_stages),
        )


def create_pipeline(config: ConverterConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline with all stages loaded."""
    load_stages()
    return Pipeline(config=config)


def convert_document(svg_text: str | bytes, config: ConverterConfig | None = None) -> ConversionResult:
    return create_pipeline(config).convert(svg_text)


def convert(svg_text: str) -> str:
    """SVG text in, VectorDrawable XML out."""
    return convert_document(svg_text).xml

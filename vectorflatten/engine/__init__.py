"""VectorFlatten conversion engine."""

from vectorflatten.engine.registry import stage, Layer, get_registry
from vectorflatten.engine.context import ConversionContext, ConversionResult, VectorPath
from vectorflatten.engine.pipeline import Pipeline, convert, convert_document, create_pipeline

__all__ = [
    "stage",
    "Layer",
    "get_registry",
    "ConversionContext",
    "ConversionResult",
    "VectorPath",
    "Pipeline",
    "convert",
    "convert_document",
    "create_pipeline",
]

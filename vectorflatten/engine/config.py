"""Converter configuration — output formatting and defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ConverterConfig:
    """Controls number formatting and fallback values of a conversion."""

    # Decimal places kept in path data and gradient coordinates
    precision: int = 3

    # Viewport size when the document declares neither viewBox nor width/height
    default_viewport_size: float = 24.0

    # SVG initial value of `fill`
    default_fill: str = "#000000"

    # Copy element ids to android:name
    emit_names: bool = True

"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    precision: int | None = Field(
        default=None,
        ge=0,
        le=8,
        description="Decimal places in emitted coordinates (defaults to the server setting)",
    )
    emit_names: bool = Field(default=True, description="Copy element ids to android:name")


class OptimizeRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    convert: bool = Field(default=True, description="Also convert the cleaned SVG")

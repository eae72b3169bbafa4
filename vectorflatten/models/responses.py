"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    stages_registered: int = 0


class ConvertResponse(BaseModel):
    xml: str
    path_count: int = 0
    gradient_count: int = 0
    warnings: list[str] = Field(default_factory=list)
    stages_completed: list[str] = Field(default_factory=list)
    processing_time_ms: float = 0.0


class KotlinResponse(BaseModel):
    language: str = "kotlin"
    source: str


class OptimizeResponse(BaseModel):
    svg: str
    optimized: bool = False
    message: str = ""
    conversion: ConvertResponse | None = None

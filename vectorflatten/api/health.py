"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from vectorflatten import __version__
from vectorflatten.engine.registry import get_registry
from vectorflatten.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        stages_registered=get_registry().count,
    )


@router.get("/prompts")
async def prompts() -> dict[str, str]:
    from vectorflatten.llm.prompts import get_all_templates

    return get_all_templates()

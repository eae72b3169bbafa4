"""GET /api/kotlin — the converter as Kotlin source, for copy/paste."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from vectorflatten.codegen.kotlin import get_kotlin_converter_source
from vectorflatten.models.responses import KotlinResponse

router = APIRouter()


@router.get("/kotlin", response_model=KotlinResponse)
async def kotlin() -> KotlinResponse:
    return KotlinResponse(source=get_kotlin_converter_source())


@router.get("/kotlin/raw", response_class=PlainTextResponse)
async def kotlin_raw() -> str:
    return get_kotlin_converter_source()

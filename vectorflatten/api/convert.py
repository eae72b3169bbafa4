"""POST /api/convert — SVG in, VectorDrawable XML out."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from vectorflatten.config import Settings
from vectorflatten.dependencies import get_settings
from vectorflatten.engine.config import ConverterConfig
from vectorflatten.engine.pipeline import create_pipeline
from vectorflatten.errors import ParseError
from vectorflatten.models.requests import ConvertRequest
from vectorflatten.models.responses import ConvertResponse

router = APIRouter()
logger = logging.getLogger(__name__)


def run_conversion(svg: str, config: ConverterConfig) -> ConvertResponse:
    """Convert ``svg``; ParseError becomes a 422."""
    start = time.perf_counter()
    try:
        result = create_pipeline(config).convert(svg)
    except ParseError as e:
        logger.info("Rejected document: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e
    elapsed = (time.perf_counter() - start) * 1000

    return ConvertResponse(
        xml=result.xml,
        path_count=result.path_count,
        gradient_count=result.gradient_count,
        warnings=result.warnings,
        stages_completed=result.completed_stages,
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/convert", response_model=ConvertResponse)
async def convert(req: ConvertRequest, settings: Settings = Depends(get_settings)) -> ConvertResponse:
    config = settings.converter_config()
    if req.precision is not None:
        config.precision = req.precision
    config.emit_names = req.emit_names
    return run_conversion(req.svg, config)

"""POST /api/optimize — LLM clean-up of constructs the converter skips, then convert."""

from __future__ import annotations

import logging
import re

from fastapi import APIRouter, Depends

from vectorflatten.config import Settings
from vectorflatten.dependencies import get_settings
from vectorflatten.api.convert import run_conversion
from vectorflatten.llm.client import get_optimized_svg
from vectorflatten.models.requests import OptimizeRequest
from vectorflatten.models.responses import OptimizeResponse

router = APIRouter()
logger = logging.getLogger(__name__)


def _extract_svg(text: str) -> str:
    """Extract SVG from LLM output, stripping markdown fences and surrounding text."""
    stripped = re.sub(r"^```(?:xml|svg|html)?\s*\n?", "", text.strip())
    stripped = re.sub(r"\n?```\s*$", "", stripped)
    stripped = stripped.strip()

    match = re.search(r"(<svg[\s\S]*</svg>)", stripped, re.IGNORECASE)
    if match:
        return match.group(1).strip()

    return stripped


@router.post("/optimize", response_model=OptimizeResponse)
async def optimize(req: OptimizeRequest, settings: Settings = Depends(get_settings)) -> OptimizeResponse:
    reply = await get_optimized_svg(req.svg)
    if reply is None:
        svg, optimized, message = req.svg, False, "LLM not configured — set ANTHROPIC_API_KEY in .env"
    else:
        svg = _extract_svg(reply)
        if "<svg" not in svg.lower():
            logger.warning("LLM reply contained no <svg>; keeping the original document")
            svg, optimized, message = req.svg, False, "LLM reply contained no SVG; original kept"
        else:
            optimized, message = True, "ok"

    conversion = run_conversion(svg, settings.converter_config()) if req.convert else None
    return OptimizeResponse(svg=svg, optimized=optimized, message=message, conversion=conversion)

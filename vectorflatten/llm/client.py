"""LangChain ChatAnthropic wrapper."""

from __future__ import annotations

import logging

from vectorflatten.config import settings
from vectorflatten.llm.prompts import get_prompt_template

logger = logging.getLogger(__name__)


async def get_optimized_svg(svg: str) -> str | None:
    """Ask the model for a converter-friendly rewrite of ``svg``. None when no API key is configured."""
    if not settings.anthropic_api_key:
        logger.info("LLM not configured; optimize is a no-op")
        return None

    from langchain_anthropic import ChatAnthropic
    from langchain_core.messages import HumanMessage, SystemMessage

    llm = ChatAnthropic(
        model=settings.model_optimize,
        api_key=settings.anthropic_api_key,
        max_tokens=8192,
    )

    template = get_prompt_template("optimize")
    messages = [
        SystemMessage(content=template.format(svg=svg)),
        HumanMessage(content="Return the optimized SVG."),
    ]

    response = await llm.ainvoke(messages)
    return str(response.content)

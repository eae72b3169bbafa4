"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vectorflatten import __version__
from vectorflatten.config import settings
from vectorflatten.engine.pipeline import load_stages

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.vectorflatten_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="VectorFlatten",
        description="SVG to Android VectorDrawable conversion with transform flattening",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all stage modules to trigger registration
    load_stages()

    from vectorflatten.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()

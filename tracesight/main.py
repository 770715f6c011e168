"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI

from tracesight import __version__
from tracesight.config import settings
from tracesight.engine.pipeline import load_transforms

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.tracesight_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="TraceSight",
        description="PCB trace connectivity from SVG path data",
        version=__version__,
    )

    # Import all transform modules to trigger registration
    load_transforms()

    from tracesight.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()

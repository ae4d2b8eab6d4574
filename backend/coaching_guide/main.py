"""FastAPI application entry point."""
from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import guide, health
from .core.config import settings

logger = logging.getLogger("coaching_guide")
logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.include_router(health.router, prefix="/api")
    app.include_router(guide.router, prefix="/api")
    logger.info("Starting %s (%s), model '%s'", settings.app_name, settings.environment, settings.guide_model)
    return app


app = create_app()


__all__ = ["app", "create_app"]

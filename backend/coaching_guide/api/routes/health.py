"""Health check endpoints."""

import logging

from fastapi import APIRouter, Depends

from coaching_guide.api.deps import get_app_settings, get_ollama_client
from coaching_guide.core.config import Settings
from coaching_guide.schemas.health import HealthResponse
from coaching_guide.services.ollama_client import OllamaClient, OllamaError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse, tags=["system"])
def healthcheck(
    client: OllamaClient = Depends(get_ollama_client),
    settings: Settings = Depends(get_app_settings),
) -> HealthResponse:
    """Readiness probe that also reports whether the guide model is pulled."""

    model_available = False
    try:
        model_available = settings.guide_model in set(client.list_models())
    except OllamaError as exc:
        logger.warning("Failed to query Ollama tags: %s", exc)

    return HealthResponse(
        status="ok",
        model=settings.guide_model,
        ollama=client.base_url,
        model_available=model_available,
    )

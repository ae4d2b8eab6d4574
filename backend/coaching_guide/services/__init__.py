"""Service layer for the application."""

from coaching_guide.services.guide_generator import (
    EmptyTranscriptError,
    GuideGenerationResult,
    GuideGenerator,
    MissingSectionsError,
)
from coaching_guide.services.ollama_client import OllamaClient, OllamaError, OllamaResponse

__all__ = [
    "EmptyTranscriptError",
    "GuideGenerationResult",
    "GuideGenerator",
    "MissingSectionsError",
    "OllamaClient",
    "OllamaError",
    "OllamaResponse",
]

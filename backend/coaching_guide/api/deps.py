"""Common dependency functions for API routes."""

from functools import lru_cache

from fastapi import Depends

from coaching_guide.core.config import Settings, get_settings
from coaching_guide.guide_renderer import RenderOptions
from coaching_guide.services.guide_generator import GuideGenerator
from coaching_guide.services.ollama_client import OllamaClient


def get_app_settings() -> Settings:
    return get_settings()


@lru_cache
def get_ollama_client() -> OllamaClient:
    settings = get_settings()
    return OllamaClient(base_url=settings.ollama_base_url, timeout=settings.ollama_timeout)


def get_render_options(settings: Settings = Depends(get_app_settings)) -> RenderOptions:
    return RenderOptions(
        keep_blank_cells=settings.keep_blank_cells,
        escape_html=settings.escape_html,
    )


def get_guide_generator(
    client: OllamaClient = Depends(get_ollama_client),
    options: RenderOptions = Depends(get_render_options),
    settings: Settings = Depends(get_app_settings),
) -> GuideGenerator:
    return GuideGenerator(
        client,
        model=settings.guide_model,
        prompt_template=settings.guide_prompt_template,
        required_sections=settings.required_sections,
        render_options=options,
        temperature=settings.guide_temperature,
        title=settings.document_title,
    )

"""Endpoints that generate, render and export coaching guides."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from coaching_guide.api.deps import get_app_settings, get_guide_generator, get_render_options
from coaching_guide.core.config import Settings
from coaching_guide.guide_exporter import DOCX_MEDIA_TYPE, export_guide_to_docx, guide_filename
from coaching_guide.guide_renderer import RenderOptions, render_document
from coaching_guide.schemas.guide import (
    GenerateGuideRequest,
    GuideResponse,
    MissingSectionsDetail,
    RenderGuideRequest,
    RenderGuideResponse,
)
from coaching_guide.services.guide_generator import (
    EmptyTranscriptError,
    GuideGenerator,
    MissingSectionsError,
)
from coaching_guide.services.ollama_client import OllamaError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/guide", tags=["guide"])


@router.post("", response_model=GuideResponse)
def generate_guide(
    payload: GenerateGuideRequest,
    generator: GuideGenerator = Depends(get_guide_generator),
) -> GuideResponse:
    """Ask the model for a coaching guide and return it as printable HTML."""

    try:
        result = generator.generate_guide(payload.transcript)
    except EmptyTranscriptError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except OllamaError as exc:
        logger.error("Guide generation failed: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    except MissingSectionsError as exc:
        detail = MissingSectionsDetail(
            error="Generated guide is incomplete",
            missing_sections=exc.missing_sections,
        )
        raise HTTPException(status_code=422, detail=detail.model_dump()) from exc
    return GuideResponse(html=result.html, model=result.model, sections=result.sections_found)


@router.post("/render", response_model=RenderGuideResponse)
def render_guide(
    payload: RenderGuideRequest,
    options: RenderOptions = Depends(get_render_options),
    settings: Settings = Depends(get_app_settings),
) -> RenderGuideResponse:
    """Render already generated guide text without calling the model."""

    if not payload.text.strip():
        raise HTTPException(status_code=400, detail="No guide text provided")
    html = render_document(payload.text, options, title=settings.document_title)
    return RenderGuideResponse(html=html)


@router.post("/docx", response_class=Response)
def export_guide(
    payload: RenderGuideRequest,
    options: RenderOptions = Depends(get_render_options),
) -> Response:
    """Return the guide text as a DOCX attachment."""

    if not payload.text.strip():
        raise HTTPException(status_code=400, detail="No guide text provided")
    content = export_guide_to_docx(payload.text, keep_blank_cells=options.keep_blank_cells)
    filename = guide_filename(payload.text)
    return Response(
        content=content,
        media_type=DOCX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )

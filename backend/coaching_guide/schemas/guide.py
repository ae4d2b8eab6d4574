"""Schemas for coaching guide endpoints."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class GenerateGuideRequest(BaseModel):
    transcript: str = Field(default="", description="Raw conversation transcript to evaluate")


class RenderGuideRequest(BaseModel):
    text: str = Field(default="", description="Guide text in the heading/table/emphasis markdown subset")


class GuideResponse(BaseModel):
    html: str = Field(..., description="Complete printable HTML document")
    success: bool = Field(default=True)
    model: str = Field(..., description="Model that wrote the guide")
    sections: List[str] = Field(
        default_factory=list,
        description="Required section titles confirmed in the generated guide.",
    )


class RenderGuideResponse(BaseModel):
    html: str = Field(..., description="Complete printable HTML document")
    success: bool = Field(default=True)


class MissingSectionsDetail(BaseModel):
    error: str
    missing_sections: List[str] = Field(default_factory=list)

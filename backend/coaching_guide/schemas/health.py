"""Schemas for system endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(..., description="Current API status")
    model: str = Field(..., description="Ollama model used to write guides")
    ollama: str = Field(..., description="Base URL of the Ollama service")
    model_available: bool = Field(..., description="Whether the model is pulled in Ollama")

"""Application configuration and settings management."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from coaching_guide.prompts import GUIDE_PROMPT_TEMPLATE, REQUIRED_SECTIONS


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="COACHING_GUIDE_", extra="ignore")

    app_name: str = Field(default="Coaching Guide API", description="Human readable application name.")
    environment: Literal["local", "development", "staging", "production"] = Field(
        default="local",
        description="Deployment environment name.",
    )
    ollama_base_url: str = Field(
        default="http://ollama:11434",
        description="Base URL for the Ollama service.",
    )
    ollama_timeout: float = Field(
        default=120.0,
        gt=0,
        description="Seconds to wait for the Ollama service before giving up.",
    )
    guide_model: str = Field(
        default="llama3",
        description="Model used to write coaching guides.",
    )
    guide_temperature: float = Field(
        default=0.3,
        ge=0,
        description="Sampling temperature passed to the guide model.",
    )
    guide_prompt_template: str = Field(
        default=GUIDE_PROMPT_TEMPLATE,
        description="Prompt template with a $transcript placeholder.",
    )
    required_sections: list[str] = Field(
        default_factory=lambda: list(REQUIRED_SECTIONS),
        description="Section titles that must appear in a generated guide.",
    )
    keep_blank_cells: bool = Field(
        default=False,
        description="Keep empty interior table cells instead of dropping them.",
    )
    escape_html: bool = Field(
        default=False,
        description="Escape markup characters in generated text before rendering.",
    )
    document_title: str = Field(
        default="Coaching Guide",
        description="Title of the rendered HTML document.",
    )
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser.",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()


settings = get_settings()

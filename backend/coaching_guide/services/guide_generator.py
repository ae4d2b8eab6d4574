"""Service that turns a conversation transcript into a rendered coaching guide."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from coaching_guide.document_shell import DEFAULT_TITLE
from coaching_guide.guide_renderer import DEFAULT_OPTIONS, RenderOptions, render_document
from coaching_guide.prompts import REQUIRED_SECTIONS, SYSTEM_PROMPT, build_guide_prompt
from coaching_guide.services.ollama_client import OllamaClient

logger = logging.getLogger(__name__)

_CODE_FENCE_RE = re.compile(r"^```[\w-]*[ \t]*\n(.*?)\n?```$", re.DOTALL)


class EmptyTranscriptError(ValueError):
    """Raised when no transcript text was supplied."""


class MissingSectionsError(ValueError):
    """Raised when the generated guide lacks required section titles."""

    def __init__(self, missing_sections: Sequence[str], markdown: str) -> None:
        self.missing_sections = list(missing_sections)
        self.markdown = markdown
        super().__init__("Generated guide is missing sections: " + ", ".join(self.missing_sections))


@dataclass
class GuideGenerationResult:
    """Generated guide text together with its rendered document."""

    markdown: str
    html: str
    model: str
    sections_found: List[str] = field(default_factory=list)


def strip_code_fence(text: str) -> str:
    """Remove a markdown code fence wrapped around the whole answer."""

    text = text.strip()
    match = _CODE_FENCE_RE.match(text)
    if match:
        return match.group(1).strip()
    return text


def find_missing_sections(markdown: str, required_sections: Sequence[str]) -> List[str]:
    """Return the required titles that do not occur literally in ``markdown``."""

    return [title for title in required_sections if title not in markdown]


class GuideGenerator:
    """Ask the model for a coaching guide and render the answer."""

    def __init__(
        self,
        ollama_client: OllamaClient,
        *,
        model: str,
        prompt_template: Optional[str] = None,
        required_sections: Sequence[str] = REQUIRED_SECTIONS,
        render_options: RenderOptions = DEFAULT_OPTIONS,
        temperature: float = 0.3,
        title: str = DEFAULT_TITLE,
    ) -> None:
        self._ollama = ollama_client
        self._model = model
        self._prompt_template = prompt_template
        self._required_sections = tuple(required_sections)
        self._render_options = render_options
        self._temperature = temperature
        self._title = title

    # ------------------------------------------------------------------
    def generate_guide(self, transcript: Optional[str]) -> GuideGenerationResult:
        """Generate, validate and render a guide for ``transcript``.

        Raises :class:`EmptyTranscriptError` for blank input,
        :class:`~coaching_guide.services.ollama_client.OllamaError` when the
        model call fails and :class:`MissingSectionsError` when the answer
        lacks a required section.
        """

        transcript = (transcript or "").strip()
        if not transcript:
            raise EmptyTranscriptError("No transcript provided")

        prompt = build_guide_prompt(transcript, self._prompt_template)
        options: Dict[str, Any] = {"temperature": self._temperature}
        logger.info(
            "Requesting guide from model '%s' for transcript of %s characters",
            self._model,
            len(transcript),
        )
        response = self._ollama.generate(
            model=self._model,
            prompt=prompt,
            system=SYSTEM_PROMPT,
            options=options,
        )

        markdown = strip_code_fence(response.response)
        missing = find_missing_sections(markdown, self._required_sections)
        if missing:
            logger.warning("Model '%s' omitted sections: %s", self._model, ", ".join(missing))
            raise MissingSectionsError(missing, markdown)

        html = render_document(markdown, self._render_options, title=self._title)
        logger.info("Rendered guide: %s markdown characters, %s html characters", len(markdown), len(html))
        return GuideGenerationResult(
            markdown=markdown,
            html=html,
            model=response.model,
            sections_found=list(self._required_sections),
        )


__all__ = [
    "EmptyTranscriptError",
    "GuideGenerationResult",
    "GuideGenerator",
    "MissingSectionsError",
    "find_missing_sections",
    "strip_code_fence",
]

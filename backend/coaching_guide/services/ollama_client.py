"""Client wrapper around the Ollama REST API."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

import httpx

logger = logging.getLogger(__name__)


class OllamaError(RuntimeError):
    """Raised when the Ollama API returns an unexpected response."""


@dataclass
class OllamaResponse:
    """Structured response from the Ollama API."""

    model: str
    response: str
    raw: Dict[str, Any]


class OllamaClient:
    """Synchronous HTTP client for Ollama interactions."""

    def __init__(
        self,
        base_url: str = "http://localhost:11434",
        *,
        timeout: float = 120.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    # ---------------------------------------------------------------------
    # Helper HTTP methods
    # ---------------------------------------------------------------------
    def _client(self, timeout: float) -> httpx.Client:
        return httpx.Client(base_url=self.base_url, timeout=timeout, transport=self._transport)

    def _get(self, path: str) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            with self._client(timeout=10) as client:
                response = client.get(path)
        except httpx.HTTPError as exc:
            raise OllamaError(f"Failed to connect to Ollama at {url}: {exc}") from exc
        if response.status_code != 200:
            raise OllamaError(f"Ollama GET {url} failed with status {response.status_code}: {response.text}")
        return self._decode(response, url)

    def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            with self._client(timeout=self.timeout) as client:
                response = client.post(path, json=payload)
        except httpx.TimeoutException as exc:
            raise OllamaError(f"Ollama at {url} did not answer within {self.timeout} seconds") from exc
        except httpx.HTTPError as exc:
            raise OllamaError(f"Failed to connect to Ollama at {url}: {exc}") from exc
        if response.status_code != 200:
            raise OllamaError(
                f"Ollama POST {url} failed with status {response.status_code}: {response.text}"
            )
        content_type = response.headers.get("Content-Type", "application/json")
        if "json" not in content_type:
            raise OllamaError(f"Unexpected content type from Ollama: {content_type}")
        return self._decode(response, url)

    @staticmethod
    def _decode(response: httpx.Response, url: str) -> Dict[str, Any]:
        try:
            data = response.json()
        except json.JSONDecodeError as exc:
            raise OllamaError(f"Ollama at {url} returned invalid JSON") from exc
        if not isinstance(data, dict):
            raise OllamaError(f"Ollama at {url} returned an unexpected payload: {data!r}")
        return data

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def list_models(self) -> Iterable[str]:
        """Return the names of locally available models."""

        tags = self._get("/api/tags")
        for item in tags.get("models", []):
            name = item.get("name") or item.get("model")
            if name:
                yield name

    def generate(
        self,
        model: str,
        prompt: str,
        *,
        system: Optional[str] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> OllamaResponse:
        """Generate text from a prompt using Ollama."""

        payload: Dict[str, Any] = {
            "model": model,
            "prompt": prompt,
            "stream": False,
        }
        if system:
            payload["system"] = system
        if options:
            payload["options"] = options

        logger.debug("POST /api/generate model=%s prompt_chars=%s", model, len(prompt))
        data = self._post("/api/generate", payload)
        text = self._extract_response_text(data)
        return OllamaResponse(model=model, response=text, raw={"request": payload, "response": data})

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _extract_response_text(data: Dict[str, Any]) -> str:
        """Extract plain text from an ``/api/generate`` response."""

        response = data.get("response")
        if response is None:
            raise OllamaError(f"Ollama response has no text: {json.dumps(data, ensure_ascii=False)}")
        return str(response)

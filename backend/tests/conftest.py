"""Shared fixtures for guide tests."""

from __future__ import annotations

import pytest

from coaching_guide.services.ollama_client import OllamaError, OllamaResponse

COMPLETE_GUIDE = """# Coaching Guide

## Conversation Summary
The agent resolved a billing question.

## Great Moments
### Showing empathy
**🌟 "I can see why that was frustrating"**
*[01:02] - because it acknowledged the customer's feelings*

## Growth Opportunities
### Closing the call
**💡 "Anything else?"**
*[05:40] - a recap of next steps would have helped*

## Coaching Scorecard
| Skill | Score | Comment |
|-------|-------|---------|
| Active listening | 4/5 | Paraphrased twice |
| Clarity | 3/5 | |

## Action Plan
Summarise the agreed steps before ending the call.
"""


class DummyClient:
    """Ollama client stub returning a fixed answer or raising an error."""

    def __init__(self, answer: str = COMPLETE_GUIDE, error: Exception | None = None) -> None:
        self.answer = answer
        self.error = error
        self.calls: list[dict] = []
        self.base_url = "http://ollama.test"
        self.models = ["llama3"]

    def generate(self, model: str, prompt: str, **kwargs) -> OllamaResponse:
        self.calls.append({"model": model, "prompt": prompt, **kwargs})
        if self.error is not None:
            raise self.error
        return OllamaResponse(model=model, response=self.answer, raw={})

    def list_models(self):
        if self.error is not None:
            raise self.error
        return iter(self.models)


@pytest.fixture
def client_factory():
    return DummyClient


@pytest.fixture
def complete_guide() -> str:
    return COMPLETE_GUIDE


@pytest.fixture
def dummy_client() -> DummyClient:
    return DummyClient()


@pytest.fixture
def failing_client() -> DummyClient:
    return DummyClient(error=OllamaError("Failed to connect to Ollama at http://ollama.test"))

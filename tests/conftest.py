"""Shared fixtures: settings with explicit credentials and fake analyzers."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest

from insightboard.analysis.models import ActionItemDraft, AnalysisResult, Priority, Sentiment
from insightboard.config import Settings


def make_settings(**overrides: Any) -> Settings:
    """Build Settings that ignore .env and any API keys in the environment."""
    values: dict[str, Any] = {
        "gemini_api_key": "",
        "google_api_key": "",
        "openai_api_key": "",
        "anthropic_api_key": "",
        "supabase_url": "",
        "supabase_key": "",
        "provider_order": "gemini,openai,anthropic",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)  # type: ignore[call-arg]


def make_result(provider: str, text: str = "Ship the release") -> AnalysisResult:
    return AnalysisResult(
        action_items=(ActionItemDraft(text=text, priority=Priority.HIGH, tags=("@Tech",)),),
        sentiment=Sentiment.POSITIVE,
        summary=f"Analyzed by {provider}",
        provider=provider,
    )


class FakeAnalyzer:
    """Stand-in provider whose analyze/complete calls are AsyncMocks."""

    def __init__(self, name: str, result: Any = None, error: Exception | None = None) -> None:
        self.name = name
        self.analyze = AsyncMock(return_value=result, side_effect=error)
        self.complete = AsyncMock(return_value="", side_effect=error)


@pytest.fixture
def no_provider_settings() -> Settings:
    return make_settings()

"""Tests for Settings, provider ordering, and the analysis enums."""

from __future__ import annotations

import pytest

from insightboard.analysis.models import Priority, Sentiment
from insightboard.config import Settings
from conftest import make_settings

# ---------------------------------------------------------------------------
# Enum tests
# ---------------------------------------------------------------------------


class TestPriority:
    def test_values(self) -> None:
        assert [p.value for p in Priority] == ["LOW", "MEDIUM", "HIGH"]

    def test_invalid_raises(self) -> None:
        with pytest.raises(ValueError):
            Priority("URGENT")

    def test_is_str_subclass(self) -> None:
        """Enum values behave as plain strings for JSON serialization."""
        assert isinstance(Priority.HIGH, str)


class TestSentiment:
    def test_values(self) -> None:
        assert [s.value for s in Sentiment] == ["POSITIVE", "NEUTRAL", "NEGATIVE"]


# ---------------------------------------------------------------------------
# Settings tests
# ---------------------------------------------------------------------------


class TestSettings:
    def test_defaults(self) -> None:
        settings = make_settings()
        assert settings.provider_names == ["gemini", "openai", "anthropic"]
        assert settings.llm_temperature == 0.3
        assert settings.llm_max_tokens == 2000
        assert settings.llm_timeout_seconds is None

    def test_provider_names_normalized(self) -> None:
        settings = make_settings(provider_order=" Anthropic ,, gemini ")
        assert settings.provider_names == ["anthropic", "gemini"]

    def test_gemini_key_preferred_over_google_key(self) -> None:
        settings = make_settings(gemini_api_key="gem", google_api_key="goo")
        assert settings.credential_for("gemini") == "gem"

    def test_google_key_fallback(self) -> None:
        assert make_settings(google_api_key="goo").credential_for("gemini") == "goo"

    def test_credentials_per_provider(self) -> None:
        settings = make_settings(openai_api_key="sk", anthropic_api_key="ak")
        assert settings.credential_for("openai") == "sk"
        assert settings.credential_for("anthropic") == "ak"
        assert settings.credential_for("gemini") == ""
        assert settings.credential_for("unknown") == ""

    def test_loaded_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        monkeypatch.setenv("PROVIDER_ORDER", "openai")
        monkeypatch.setenv("LLM_TIMEOUT_SECONDS", "30")

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.credential_for("openai") == "sk-env"
        assert settings.provider_names == ["openai"]
        assert settings.llm_timeout_seconds == 30.0

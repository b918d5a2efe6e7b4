from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings validated via Pydantic.

    Values are loaded from environment variables and/or a .env file.
    """

    # API Keys: a provider only participates when its key is non-empty
    gemini_api_key: str = ""
    google_api_key: str = ""  # Accepted as an alias for GEMINI_API_KEY
    openai_api_key: str = ""
    anthropic_api_key: str = ""

    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""

    # LLM config
    gemini_model: str = "gemini-2.0-flash"
    openai_model: str = "gpt-4o-mini"
    anthropic_model: str = "claude-3-haiku-20240307"
    llm_temperature: float = 0.3
    llm_max_tokens: int = 2000
    llm_timeout_seconds: float | None = None
    provider_order: str = "gemini,openai,anthropic"

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def provider_names(self) -> list[str]:
        """Provider names from ``provider_order``, lower-cased, in declared order."""
        return [name.strip().lower() for name in self.provider_order.split(",") if name.strip()]

    def credential_for(self, provider: str) -> str:
        """Return the API key designated for *provider* ("" when absent)."""
        if provider == "gemini":
            return self.gemini_api_key or self.google_api_key
        if provider == "openai":
            return self.openai_api_key
        if provider == "anthropic":
            return self.anthropic_api_key
        return ""


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Gracefully handles missing .env files (e.g. in CI/testing) by falling
    back to environment variables and defaults.
    """
    try:
        return Settings()
    except Exception:
        # If .env is missing or unreadable, build settings from env vars only.
        return Settings(_env_file=None)  # type: ignore[call-arg]

"""LLM provider adapters: Gemini, OpenAI, and Anthropic Claude.

Each adapter builds a provider-specific request from the shared prompt
templates, calls the provider's SDK, and translates SDK failures into the
pipeline's error taxonomy.  Adapters share the ``TranscriptAnalyzer``
protocol rather than a base class.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

import google.generativeai as genai
from anthropic import APIConnectionError as AnthropicConnectionError
from anthropic import APIStatusError as AnthropicStatusError
from anthropic import AsyncAnthropic
from google.api_core import exceptions as google_exceptions
from openai import APIConnectionError as OpenAIConnectionError
from openai import APIStatusError as OpenAIStatusError
from openai import AsyncOpenAI

from insightboard.analysis.errors import ConfigurationError, ParseError, ProviderError
from insightboard.analysis.models import AnalysisResult
from insightboard.analysis.parsing import parse_analysis
from insightboard.analysis.prompts import SYSTEM_PROMPT, build_analysis_prompt
from insightboard.config import Settings

# google-generativeai keeps its credential in process-global state
_gemini_api_key: str | None = None


def _configure_gemini(api_key: str) -> None:
    global _gemini_api_key
    if api_key != _gemini_api_key:
        genai.configure(api_key=api_key)  # type: ignore[attr-defined]
        _gemini_api_key = api_key


class TranscriptAnalyzer(Protocol):
    """Contract shared by every provider adapter."""

    name: str

    async def complete(self, prompt: str, system: str = SYSTEM_PROMPT) -> str: ...

    async def analyze(self, transcript: str) -> AnalysisResult: ...


class GeminiProvider:
    """Google Gemini via ``google-generativeai``."""

    name = "gemini"

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.0-flash",
        temperature: float = 0.3,
        max_tokens: int = 2000,
        timeout: float | None = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("Google API key not configured")
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        _configure_gemini(api_key)

    @classmethod
    def from_settings(cls, settings: Settings) -> GeminiProvider:
        return cls(
            api_key=settings.credential_for(cls.name),
            model=settings.gemini_model,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
            timeout=settings.llm_timeout_seconds,
        )

    async def complete(self, prompt: str, system: str = SYSTEM_PROMPT) -> str:
        model = genai.GenerativeModel(  # type: ignore[attr-defined]
            self.model,
            system_instruction=system,
            generation_config={
                "temperature": self.temperature,
                "max_output_tokens": self.max_tokens,
            },
        )
        request_options: dict[str, Any] = {}
        if self.timeout is not None:
            request_options["timeout"] = self.timeout

        try:
            response = await model.generate_content_async(prompt, request_options=request_options)
        except google_exceptions.GoogleAPICallError as e:
            status = int(e.code) if e.code is not None else None
            raise ProviderError(self.name, status, e.message) from e
        except google_exceptions.GoogleAPIError as e:
            raise ProviderError(self.name, None, str(e)) from e

        # response.text raises ValueError when the candidate was blocked or empty
        try:
            text: str = response.text
        except ValueError as e:
            raise ParseError(f"No response from Google Gemini: {e}") from e
        if not text:
            raise ParseError("No response from Google Gemini")
        return text

    async def analyze(self, transcript: str) -> AnalysisResult:
        raw = await self.complete(build_analysis_prompt(transcript))
        return parse_analysis(raw, self.name)


class OpenAIProvider:
    """OpenAI chat completions via ``AsyncOpenAI``."""

    name = "openai"

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        temperature: float = 0.3,
        max_tokens: int = 2000,
        timeout: float | None = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("OpenAI API key not configured")
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        client_kwargs: dict[str, Any] = {"api_key": api_key}
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        self.client = AsyncOpenAI(**client_kwargs)

    @classmethod
    def from_settings(cls, settings: Settings) -> OpenAIProvider:
        return cls(
            api_key=settings.credential_for(cls.name),
            model=settings.openai_model,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
            timeout=settings.llm_timeout_seconds,
        )

    async def complete(self, prompt: str, system: str = SYSTEM_PROMPT) -> str:
        try:
            completion = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except OpenAIStatusError as e:
            raise ProviderError(self.name, e.status_code, e.message) from e
        except OpenAIConnectionError as e:
            raise ProviderError(self.name, None, str(e)) from e

        content = completion.choices[0].message.content if completion.choices else None
        if not content:
            raise ParseError("No response from OpenAI")
        return content

    async def analyze(self, transcript: str) -> AnalysisResult:
        raw = await self.complete(build_analysis_prompt(transcript))
        return parse_analysis(raw, self.name)


class AnthropicProvider:
    """Anthropic Claude messages API via ``AsyncAnthropic``."""

    name = "anthropic"

    def __init__(
        self,
        api_key: str,
        model: str = "claude-3-haiku-20240307",
        temperature: float = 0.3,
        max_tokens: int = 2000,
        timeout: float | None = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("Anthropic API key not configured")
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        client_kwargs: dict[str, Any] = {"api_key": api_key}
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        self.client = AsyncAnthropic(**client_kwargs)

    @classmethod
    def from_settings(cls, settings: Settings) -> AnthropicProvider:
        return cls(
            api_key=settings.credential_for(cls.name),
            model=settings.anthropic_model,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
            timeout=settings.llm_timeout_seconds,
        )

    async def complete(self, prompt: str, system: str = SYSTEM_PROMPT) -> str:
        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                system=system,
                messages=[{"role": "user", "content": prompt}],
            )
        except AnthropicStatusError as e:
            raise ProviderError(self.name, e.status_code, e.message) from e
        except AnthropicConnectionError as e:
            raise ProviderError(self.name, None, str(e)) from e

        # Only text blocks carry the JSON payload
        text = "".join(block.text for block in response.content if block.type == "text")
        if not text:
            raise ParseError("No response from Anthropic")
        return text

    async def analyze(self, transcript: str) -> AnalysisResult:
        raw = await self.complete(build_analysis_prompt(transcript))
        return parse_analysis(raw, self.name)


PROVIDER_FACTORIES: dict[str, Callable[[Settings], TranscriptAnalyzer]] = {
    GeminiProvider.name: GeminiProvider.from_settings,
    OpenAIProvider.name: OpenAIProvider.from_settings,
    AnthropicProvider.name: AnthropicProvider.from_settings,
}

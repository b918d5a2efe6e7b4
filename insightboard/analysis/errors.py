"""Exceptions raised by the analysis pipeline and the persistence layer."""

from __future__ import annotations


class AnalysisError(Exception):
    """Base class for failures of a single provider attempt."""

    kind = "analysis_error"


class ConfigurationError(AnalysisError):
    """A provider's credential is missing; the provider is skipped."""

    kind = "configuration_error"


class ProviderError(AnalysisError):
    """A provider answered with a non-success status or could not be reached."""

    kind = "provider_error"

    def __init__(self, provider: str, status_code: int | None = None, message: str = "") -> None:
        self.provider = provider
        self.status_code = status_code
        detail = f"{provider} API error"
        if status_code is not None:
            detail += f": {status_code}"
        if message:
            detail += f" ({message})"
        super().__init__(detail)


class ParseError(AnalysisError):
    """A provider response could not be decoded into an analysis result."""

    kind = "parse_error"


class ValidationError(ValueError):
    """Caller supplied invalid input, e.g. an empty transcript."""


class StorageError(RuntimeError):
    """Persisting a transcript or its action items failed."""

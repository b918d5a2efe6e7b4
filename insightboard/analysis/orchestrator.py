"""Provider selection and fallback chain for transcript analysis."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

from insightboard.analysis.errors import AnalysisError, ConfigurationError
from insightboard.analysis.heuristic import fallback_analysis
from insightboard.analysis.models import AnalysisResult, ProviderConfig
from insightboard.analysis.providers import PROVIDER_FACTORIES, TranscriptAnalyzer
from insightboard.config import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


def resolve_provider_configs(settings: Settings) -> list[ProviderConfig]:
    """Resolve the configured provider order into ProviderConfig entries.

    Unknown names are skipped and duplicates keep their first position.
    """
    configs: list[ProviderConfig] = []
    seen: set[str] = set()
    for name in settings.provider_names:
        if name in seen:
            continue
        if name not in PROVIDER_FACTORIES:
            logger.warning("Ignoring unknown LLM provider %r in provider order", name)
            continue
        seen.add(name)
        configs.append(ProviderConfig(name=name, is_available=bool(settings.credential_for(name))))
    return configs


def build_analyzers(settings: Settings) -> list[TranscriptAnalyzer]:
    """Instantiate adapters for every available provider, in configured order."""
    analyzers: list[TranscriptAnalyzer] = []
    for config in resolve_provider_configs(settings):
        if not config.is_available:
            logger.debug("Provider %s has no credential configured, skipping", config.name)
            continue
        try:
            analyzers.append(PROVIDER_FACTORIES[config.name](settings))
        except ConfigurationError as e:
            logger.warning("Provider %s unavailable: %s", config.name, e)
    return analyzers


async def first_success(
    analyzers: Sequence[TranscriptAnalyzer],
    attempt: Callable[[TranscriptAnalyzer], Awaitable[T]],
) -> T | None:
    """Await *attempt* for each analyzer in order and return the first result.

    Each analyzer gets exactly one attempt; failures are logged and the next
    analyzer is tried.  Returns None when every attempt failed or the list
    is empty.
    """
    for analyzer in analyzers:
        try:
            logger.info("Trying %s...", analyzer.name)
            result = await attempt(analyzer)
        except AnalysisError as e:
            logger.warning("%s failed (%s): %s", analyzer.name, e.kind, e)
            continue
        except Exception:
            logger.exception("%s failed unexpectedly", analyzer.name)
            continue
        logger.info("Successfully analyzed using %s", analyzer.name)
        return result
    return None


async def run_analysis(transcript: str, analyzers: Sequence[TranscriptAnalyzer]) -> AnalysisResult:
    """Analyze *transcript* with the first provider that succeeds.

    Falls back to the keyword heuristic when no provider is configured or
    every provider fails, so this never raises.
    """
    result = await first_success(analyzers, lambda analyzer: analyzer.analyze(transcript))
    if result is not None:
        return result

    logger.warning("All LLM providers failed, using fallback analysis")
    return fallback_analysis(transcript)

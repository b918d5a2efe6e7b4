"""Transcript analysis entry points used by the rest of the application."""

from __future__ import annotations

import logging

from insightboard.analysis.errors import ValidationError
from insightboard.analysis.models import ActionItemDraft, AnalysisResult, Priority
from insightboard.analysis.orchestrator import build_analyzers, first_success, run_analysis
from insightboard.analysis.parsing import parse_suggestions
from insightboard.analysis.prompts import SUGGESTION_SYSTEM_PROMPT, build_suggestion_prompt
from insightboard.analysis.providers import TranscriptAnalyzer
from insightboard.config import Settings, get_settings

logger = logging.getLogger(__name__)

TRANSCRIPT_REQUIRED = "Transcript content is required"

FALLBACK_SUGGESTIONS: tuple[ActionItemDraft, ...] = (
    ActionItemDraft(
        text="Review and prioritize outstanding items from this context",
        priority=Priority.MEDIUM,
        tags=("@Admin",),
    ),
    ActionItemDraft(
        text="Follow up with stakeholders on next steps",
        priority=Priority.MEDIUM,
        tags=("@Admin",),
    ),
)


async def analyze_transcript(transcript: str | None, settings: Settings | None = None) -> AnalysisResult:
    """Extract action items, sentiment, and a summary from a meeting transcript.

    Providers are tried in the configured order; if none is configured or
    all of them fail, a keyword heuristic result is returned instead.

    Args:
        transcript: The raw meeting transcript text.
        settings: Settings to resolve providers from (defaults to ``get_settings()``).

    Returns:
        An AnalysisResult with at least one action item.

    Raises:
        ValidationError: The transcript is missing or empty.
    """
    if not transcript:
        raise ValidationError(TRANSCRIPT_REQUIRED)

    settings = settings or get_settings()
    return await run_analysis(transcript, build_analyzers(settings))


async def generate_action_item_suggestions(
    context: str, settings: Settings | None = None
) -> list[ActionItemDraft]:
    """Suggest a handful of action items for free-form context.

    Never raises: falls back to two generic suggestions when no provider
    produces a usable answer.
    """
    if not context or not context.strip():
        return list(FALLBACK_SUGGESTIONS)

    settings = settings or get_settings()
    prompt = build_suggestion_prompt(context)

    async def _suggest(analyzer: TranscriptAnalyzer) -> list[ActionItemDraft]:
        raw = await analyzer.complete(prompt, system=SUGGESTION_SYSTEM_PROMPT)
        return parse_suggestions(raw, analyzer.name)

    suggestions = await first_success(build_analyzers(settings), _suggest)
    if suggestions is None:
        logger.warning("No provider produced suggestions, returning defaults")
        return list(FALLBACK_SUGGESTIONS)
    return suggestions

"""Transcript submission: analyze a transcript and persist its action items."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from supabase import Client

from insightboard.analysis.errors import StorageError, ValidationError
from insightboard.analysis.models import AnalysisResult
from insightboard.analysis.service import TRANSCRIPT_REQUIRED, analyze_transcript
from insightboard.config import Settings
from insightboard.storage import get_supabase_client, store_action_items, store_transcript

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmissionResult:
    """Identifiers and analysis produced by one transcript submission."""

    transcript_id: str
    analysis: AnalysisResult
    items_stored: int


async def submit_transcript(
    user_id: str,
    content: str | None,
    title: str | None = None,
    client: Client | None = None,
    settings: Settings | None = None,
) -> SubmissionResult:
    """Analyze a transcript, store it, and store one action item per draft.

    Args:
        user_id: The submitting user's identifier.
        content: The raw transcript text.
        title: Optional transcript title.
        client: Supabase client (created from settings when omitted).
        settings: Settings used for provider resolution.

    Raises:
        ValidationError: Missing user id or empty transcript.
        StorageError: The transcript or its action items could not be stored.
    """
    if not user_id:
        raise ValidationError("User id is required")
    if not content:
        raise ValidationError(TRANSCRIPT_REQUIRED)

    analysis = await analyze_transcript(content, settings=settings)

    try:
        client = client or get_supabase_client()
        transcript_id = store_transcript(
            client,
            user_id=user_id,
            content=content,
            title=title,
            sentiment=analysis.sentiment,
        )
        items_stored = store_action_items(client, user_id, transcript_id, analysis.action_items)
    except Exception as e:
        logger.exception("Storing transcript failed for user %s", user_id)
        raise StorageError("Failed to process transcript") from e

    logger.info(
        "Stored transcript %s with %d action items (provider=%s)",
        transcript_id,
        items_stored,
        analysis.provider,
    )
    return SubmissionResult(transcript_id=transcript_id, analysis=analysis, items_stored=items_stored)

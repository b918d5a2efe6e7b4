"""Supabase storage helpers for transcripts and action items."""

from __future__ import annotations

from collections.abc import Sequence

from supabase import Client, create_client

from insightboard.analysis.models import ActionItemDraft, Sentiment
from insightboard.config import get_settings

DEFAULT_TRANSCRIPT_TITLE = "Untitled Transcript"
PENDING = "PENDING"


def get_supabase_client() -> Client:
    """Create and return a Supabase client from the configured URL and key."""
    settings = get_settings()
    return create_client(settings.supabase_url, settings.supabase_key)


def store_transcript(
    client: Client,
    user_id: str,
    content: str,
    title: str | None = None,
    sentiment: Sentiment | None = None,
) -> str:
    """Store a transcript row and return the generated transcript ID."""
    result = (
        client.table("transcripts")
        .insert(
            {
                "user_id": user_id,
                "title": title or DEFAULT_TRANSCRIPT_TITLE,
                "content": content,
                "sentiment": sentiment.value if sentiment else None,
            }
        )
        .execute()
    )
    return str(result.data[0]["id"])


def store_action_items(
    client: Client,
    user_id: str,
    transcript_id: str | None,
    items: Sequence[ActionItemDraft],
) -> int:
    """Bulk-insert one pending action item row per draft (batched by 50).

    Returns:
        Number of rows stored.
    """
    if not items:
        return 0

    rows = [
        {
            "text": item.text,
            "priority": item.priority.value,
            "tags": list(item.tags),
            "status": PENDING,
            "user_id": user_id,
            "transcript_id": transcript_id,
        }
        for item in items
    ]

    # Insert in batches of 50
    batch_size = 50
    for i in range(0, len(rows), batch_size):
        client.table("action_items").insert(rows[i : i + batch_size]).execute()

    return len(rows)

"""Decode and normalize free-text LLM responses into analysis results."""

from __future__ import annotations

import json
import re
from typing import Any

from insightboard.analysis.errors import ParseError
from insightboard.analysis.models import ActionItemDraft, AnalysisResult, Priority, Sentiment

UNTITLED_ACTION_ITEM = "Untitled action item"

# First fenced block, with or without a language hint (```json ... ```)
_FENCE_RE = re.compile(r"```[a-zA-Z0-9_-]*[ \t]*\r?\n?(.*?)```", re.DOTALL)

_PRIORITIES = {p.value for p in Priority}
_SENTIMENTS = {s.value for s in Sentiment}


def extract_json_text(raw: str) -> str:
    """Return the contents of the first markdown code fence, or the stripped raw text."""
    match = _FENCE_RE.search(raw)
    if match:
        return match.group(1).strip()
    return raw.strip()


def decode_json(raw: str | None) -> Any:
    """Strip fencing from *raw* and decode it as JSON.

    Raises:
        ParseError: The text is empty or not valid JSON.
    """
    if not raw or not raw.strip():
        raise ParseError("Empty response from provider")
    payload = extract_json_text(raw)
    try:
        return json.loads(payload)
    except (json.JSONDecodeError, ValueError) as e:
        raise ParseError(f"Response is not valid JSON: {e}") from e


def normalize_action_item(item: Any) -> ActionItemDraft:
    """Coerce one loosely-typed item into an ActionItemDraft.

    Missing text becomes a placeholder, unknown priorities become MEDIUM and
    non-list tags become an empty tuple.
    """
    data: dict[str, Any] = item if isinstance(item, dict) else {}

    text = data.get("text")
    text = text.strip() if isinstance(text, str) else ""

    priority = data.get("priority")
    tags = data.get("tags")

    return ActionItemDraft(
        text=text or UNTITLED_ACTION_ITEM,
        priority=Priority(priority) if isinstance(priority, str) and priority in _PRIORITIES else Priority.MEDIUM,
        tags=tuple(t for t in tags if isinstance(t, str)) if isinstance(tags, list) else (),
    )


def parse_analysis(raw: str | None, provider: str) -> AnalysisResult:
    """Parse a provider's raw text response into an AnalysisResult.

    Args:
        raw: The model's text output, optionally wrapped in a ```json fence.
        provider: Name of the provider that produced the text.

    Raises:
        ParseError: The payload is not JSON, has no ``actionItems`` array, or
            the array is empty.
    """
    data = decode_json(raw)
    if not isinstance(data, dict):
        raise ParseError(f"Invalid response format from {provider}: expected an object")

    items = data.get("actionItems")
    if not isinstance(items, list):
        raise ParseError(f"Invalid response format from {provider}: missing actionItems")
    if not items:
        raise ParseError(f"{provider} returned no action items")

    sentiment = data.get("sentiment")
    summary = data.get("summary")

    return AnalysisResult(
        action_items=tuple(normalize_action_item(i) for i in items),
        sentiment=Sentiment(sentiment) if isinstance(sentiment, str) and sentiment in _SENTIMENTS else None,
        summary=summary.strip() if isinstance(summary, str) and summary.strip() else None,
        provider=provider,
    )


def parse_suggestions(raw: str | None, provider: str) -> list[ActionItemDraft]:
    """Parse a suggestion response: a JSON array, or an object with ``actionItems``."""
    data = decode_json(raw)
    if isinstance(data, dict):
        data = data.get("actionItems")
    if not isinstance(data, list) or not data:
        raise ParseError(f"Invalid suggestion format from {provider}")
    return [normalize_action_item(i) for i in data]

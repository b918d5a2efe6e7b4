"""Keyword-based fallback analysis used when no LLM provider succeeds."""

from __future__ import annotations

from insightboard.analysis.models import ActionItemDraft, AnalysisResult, Priority, Sentiment

FALLBACK_PROVIDER = "fallback"
FALLBACK_TAGS = ("@Admin",)
FALLBACK_SUMMARY = "AI analysis unavailable. Please review transcript manually for action items."

ACTION_ITEMS_DETECTED_TEXT = "Review transcript for specific action items - AI analysis unavailable"
NO_ACTION_ITEMS_TEXT = "Review meeting transcript manually - AI analysis unavailable"

ACTION_KEYWORDS: tuple[str, ...] = (
    "action",
    "task",
    "todo",
    "follow up",
    "next steps",
    "deadline",
    "due",
    "assign",
    "responsible",
)

HIGH_PRIORITY_KEYWORDS: tuple[str, ...] = ("urgent", "asap", "immediately", "critical", "important")
LOW_PRIORITY_KEYWORDS: tuple[str, ...] = ("eventually", "when possible", "low priority")


def _mentions(keywords: tuple[str, ...], words: list[str], normalized: str) -> bool:
    """True if any word contains a keyword; multi-word keywords match the whole text."""
    for keyword in keywords:
        if " " in keyword:
            if keyword in normalized:
                return True
        elif any(keyword in word for word in words):
            return True
    return False


def detect_priority(transcript: str) -> Priority:
    """Pick HIGH on urgency keywords, LOW on deprioritization keywords, else MEDIUM."""
    words = transcript.lower().split()
    normalized = " ".join(words)
    if _mentions(HIGH_PRIORITY_KEYWORDS, words, normalized):
        return Priority.HIGH
    if _mentions(LOW_PRIORITY_KEYWORDS, words, normalized):
        return Priority.LOW
    return Priority.MEDIUM


def has_action_keywords(transcript: str) -> bool:
    words = transcript.lower().split()
    return _mentions(ACTION_KEYWORDS, words, " ".join(words))


def fallback_analysis(transcript: str) -> AnalysisResult:
    """Produce a single generic review task without any network access.

    Always returns exactly one action item, tagged ``@Admin``, with NEUTRAL
    sentiment. The item text depends on whether action keywords were found;
    its priority always follows the priority keyword scan.
    """
    text = ACTION_ITEMS_DETECTED_TEXT if has_action_keywords(transcript) else NO_ACTION_ITEMS_TEXT
    item = ActionItemDraft(text=text, priority=detect_priority(transcript), tags=FALLBACK_TAGS)

    return AnalysisResult(
        action_items=(item,),
        sentiment=Sentiment.NEUTRAL,
        summary=FALLBACK_SUMMARY,
        provider=FALLBACK_PROVIDER,
    )

"""Data models for transcript analysis results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class Priority(StrEnum):
    """Priority of an extracted action item."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class Sentiment(StrEnum):
    """Overall sentiment of a meeting."""

    POSITIVE = "POSITIVE"
    NEUTRAL = "NEUTRAL"
    NEGATIVE = "NEGATIVE"


@dataclass(frozen=True)
class ActionItemDraft:
    """A single action item extracted from a transcript, not yet persisted."""

    text: str
    priority: Priority = Priority.MEDIUM
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one transcript analysis call.

    ``provider`` names the provider that produced the result, or
    ``"fallback"`` when the keyword heuristic was used.
    """

    action_items: tuple[ActionItemDraft, ...] = field(default_factory=tuple)
    sentiment: Sentiment | None = None
    summary: str | None = None
    provider: str = "fallback"


@dataclass(frozen=True)
class ProviderConfig:
    """Whether a named provider can take part in the current call."""

    name: str
    is_available: bool

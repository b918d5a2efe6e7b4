"""Tests for the keyword fallback analysis (no external APIs required)."""

from __future__ import annotations

import pytest

from insightboard.analysis.heuristic import (
    ACTION_ITEMS_DETECTED_TEXT,
    FALLBACK_SUMMARY,
    NO_ACTION_ITEMS_TEXT,
    detect_priority,
    fallback_analysis,
    has_action_keywords,
)
from insightboard.analysis.models import Priority, Sentiment


class TestDetectPriority:
    def test_urgent_is_high(self) -> None:
        assert detect_priority("This is urgent, please handle") is Priority.HIGH

    @pytest.mark.parametrize("word", ["ASAP", "immediately", "Critical", "important"])
    def test_high_keywords(self, word: str) -> None:
        assert detect_priority(f"We need this {word}.") is Priority.HIGH

    @pytest.mark.parametrize("text", ["We can do it eventually", "Handle it when possible", "This is low priority"])
    def test_low_keywords(self, text: str) -> None:
        assert detect_priority(text) is Priority.LOW

    def test_high_wins_over_low(self) -> None:
        assert detect_priority("urgent but eventually") is Priority.HIGH

    def test_default_medium(self) -> None:
        assert detect_priority("We talked about the weather") is Priority.MEDIUM


class TestHasActionKeywords:
    @pytest.mark.parametrize(
        "text",
        [
            "Alice has an action to update the deck",
            "Tasks for next week",
            "Add it to the TODO list",
            "The deadline is Friday",
            "Reports are due Monday",
            "Bob is responsible for QA",
            "Let's follow up tomorrow",
            "Next   steps are unclear",
        ],
    )
    def test_detects(self, text: str) -> None:
        assert has_action_keywords(text)

    def test_ignores_small_talk(self) -> None:
        assert not has_action_keywords("Nice weather today. How was your weekend?")


class TestFallbackAnalysis:
    def test_no_action_keywords(self) -> None:
        result = fallback_analysis("We chatted about the weekend.")

        assert len(result.action_items) == 1
        item = result.action_items[0]
        assert item.text == NO_ACTION_ITEMS_TEXT
        assert item.text == "Review meeting transcript manually - AI analysis unavailable"
        assert item.priority is Priority.MEDIUM
        assert item.tags == ("@Admin",)
        assert result.sentiment is Sentiment.NEUTRAL
        assert result.summary == FALLBACK_SUMMARY
        assert result.provider == "fallback"

    def test_action_keywords_use_detected_priority(self) -> None:
        result = fallback_analysis("Urgent: the task must ship before the deadline")

        item = result.action_items[0]
        assert item.text == ACTION_ITEMS_DETECTED_TEXT
        assert item.priority is Priority.HIGH
        assert item.tags == ("@Admin",)

    def test_priority_detected_without_action_keywords(self) -> None:
        item = fallback_analysis("This is urgent").action_items[0]
        assert item.text == "Review meeting transcript manually - AI analysis unavailable"
        assert item.priority is Priority.HIGH

    def test_low_priority_task(self) -> None:
        result = fallback_analysis("Someone should own this task eventually")
        assert result.action_items[0].priority is Priority.LOW

    def test_deterministic(self) -> None:
        transcript = "Carol will follow up on the contract ASAP"
        assert fallback_analysis(transcript) == fallback_analysis(transcript)

    @pytest.mark.parametrize("transcript", ["", "   ", "\n\t"])
    def test_never_raises_on_blank_input(self, transcript: str) -> None:
        result = fallback_analysis(transcript)
        assert result.action_items[0].text == NO_ACTION_ITEMS_TEXT

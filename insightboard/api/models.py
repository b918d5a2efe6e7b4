"""Pydantic request/response schemas for the InsightBoard API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from insightboard.analysis.models import ActionItemDraft, AnalysisResult, Priority, Sentiment


class AnalyzeRequest(BaseModel):
    """Request body for the /api/analyze endpoint."""

    transcript: str


class SubmitTranscriptRequest(BaseModel):
    """Request body for the /api/transcripts endpoint."""

    user_id: str
    content: str
    title: str | None = None


class SuggestionRequest(BaseModel):
    """Request body for the /api/suggestions endpoint."""

    context: str


class ActionItemResponse(BaseModel):
    """A single action item in API responses."""

    text: str
    priority: Priority
    tags: list[str] = []

    @classmethod
    def from_draft(cls, draft: ActionItemDraft) -> ActionItemResponse:
        return cls(text=draft.text, priority=draft.priority, tags=list(draft.tags))


class AnalysisResponse(BaseModel):
    """Analysis result in the camelCase shape the dashboard consumes."""

    model_config = ConfigDict(populate_by_name=True)

    action_items: list[ActionItemResponse] = Field(default_factory=list, alias="actionItems")
    sentiment: Sentiment | None = None
    summary: str | None = None
    provider: str

    @classmethod
    def from_result(cls, result: AnalysisResult) -> AnalysisResponse:
        return cls(
            action_items=[ActionItemResponse.from_draft(item) for item in result.action_items],
            sentiment=result.sentiment,
            summary=result.summary,
            provider=result.provider,
        )


class SubmitTranscriptResponse(BaseModel):
    """Response body for the /api/transcripts endpoint."""

    transcript_id: str
    items_stored: int
    analysis: AnalysisResponse

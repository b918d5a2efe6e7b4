"""Analysis endpoints: analyze, submit, and suggest action items."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from insightboard.analysis.errors import StorageError, ValidationError
from insightboard.analysis.service import analyze_transcript, generate_action_item_suggestions
from insightboard.api.models import (
    ActionItemResponse,
    AnalysisResponse,
    AnalyzeRequest,
    SubmitTranscriptRequest,
    SubmitTranscriptResponse,
    SuggestionRequest,
)
from insightboard.transcripts import submit_transcript

router = APIRouter()


@router.post("/api/analyze", response_model=AnalysisResponse)
async def analyze(request: AnalyzeRequest) -> AnalysisResponse:
    """Analyze a transcript without storing anything."""
    try:
        result = await analyze_transcript(request.transcript)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return AnalysisResponse.from_result(result)


@router.post("/api/transcripts", response_model=SubmitTranscriptResponse, status_code=201)
async def create_transcript(request: SubmitTranscriptRequest) -> SubmitTranscriptResponse:
    """Analyze a transcript and persist it with its extracted action items."""
    try:
        submission = await submit_transcript(
            user_id=request.user_id,
            content=request.content,
            title=request.title,
        )
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except StorageError as exc:
        # Supabase unreachable or rejected the insert
        raise HTTPException(status_code=503, detail=str(exc)) from exc

    return SubmitTranscriptResponse(
        transcript_id=submission.transcript_id,
        items_stored=submission.items_stored,
        analysis=AnalysisResponse.from_result(submission.analysis),
    )


@router.post("/api/suggestions", response_model=list[ActionItemResponse])
async def suggest(request: SuggestionRequest) -> list[ActionItemResponse]:
    """Suggest action items for free-form context."""
    suggestions = await generate_action_item_suggestions(request.context)
    return [ActionItemResponse.from_draft(s) for s in suggestions]

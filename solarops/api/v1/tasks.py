"""Task status transition checks for API v1."""

from __future__ import annotations

from fastapi import APIRouter

from solarops.schemas.progress import TransitionCheckRequest, TransitionCheckResponse
from solarops.workflow.transitions import can_transition_to, next_allowed_statuses, transition_error_message

router = APIRouter(tags=["tasks"])


@router.post("/tasks/transition-check", response_model=TransitionCheckResponse)
def check_transition(payload: TransitionCheckRequest) -> TransitionCheckResponse:
    allowed = can_transition_to(payload.current, payload.target)
    message = None
    if not allowed or payload.current == payload.target:
        message = transition_error_message(payload.current, payload.target)
    return TransitionCheckResponse(
        allowed=allowed,
        message=message,
        next_allowed=next_allowed_statuses(payload.current),
    )

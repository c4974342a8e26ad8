"""Pydantic schema package for engine inputs and API contracts."""

from solarops.schemas.customers import CustomerAggregate, TaskRecord
from solarops.schemas.progress import (
    CustomerProgressResponse,
    PhaseProgressResponse,
    PipelinePhaseResponse,
    PipelineResponse,
    PipelineStepResponse,
    StepStatusResponse,
    TrackerResponse,
    TrackerRow,
    TrackerSummaryResponse,
    TransitionCheckRequest,
    TransitionCheckResponse,
)

__all__ = [
    "CustomerAggregate",
    "CustomerProgressResponse",
    "PhaseProgressResponse",
    "PipelinePhaseResponse",
    "PipelineResponse",
    "PipelineStepResponse",
    "StepStatusResponse",
    "TaskRecord",
    "TrackerResponse",
    "TrackerRow",
    "TrackerSummaryResponse",
    "TransitionCheckRequest",
    "TransitionCheckResponse",
]

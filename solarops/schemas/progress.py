"""Progress request/response schemas for API contracts."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from solarops.core.enums import EffectiveStatus, TaskStatus


class PipelineStepResponse(BaseModel):
    key: str
    label: str
    phase_id: str
    conditional: bool


class PipelinePhaseResponse(BaseModel):
    id: str
    label: str
    steps: list[PipelineStepResponse]


class PipelineResponse(BaseModel):
    step_count: int
    phases: list[PipelinePhaseResponse]


class StepStatusResponse(BaseModel):
    key: str
    label: str
    phase_id: str
    status: EffectiveStatus
    badge: str
    task_id: int | str | None = None
    assigned_to_name: str | None = None
    assigned_to_role: str | None = None
    task_created_at: datetime | None = None


class PhaseProgressResponse(BaseModel):
    phase_id: str
    label: str
    completed_count: int = Field(ge=0)
    applicable_count: int = Field(ge=0)
    fraction: str
    percent: int = Field(ge=0, le=100)
    all_done: bool
    has_in_progress: bool
    collapsed: bool


class CustomerProgressResponse(BaseModel):
    customer_id: int | str
    applicant_name: str
    overall_percent: int = Field(ge=0, le=100)
    headline: str
    steps: list[StepStatusResponse]
    phases: list[PhaseProgressResponse]


class TrackerRow(BaseModel):
    customer_id: int | str
    applicant_name: str
    mobile_number: str
    district: str
    overall_percent: int = Field(ge=0, le=100)
    headline: str


class TrackerSummaryResponse(BaseModel):
    total: int
    completed: int
    in_progress: int
    pending: int


class TrackerResponse(BaseModel):
    items: list[TrackerRow]
    summary: TrackerSummaryResponse


class TransitionCheckRequest(BaseModel):
    current: TaskStatus
    target: TaskStatus


class TransitionCheckResponse(BaseModel):
    allowed: bool
    message: str | None = None
    next_allowed: list[TaskStatus]

"""Workflow progress endpoints for API v1."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from solarops.core.config import get_config
from solarops.core.enums import TrackingBucket
from solarops.core.exceptions import UnknownStepError
from solarops.schemas.customers import CustomerAggregate
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
)
from solarops.workflow.engine import CustomerProgress, StepProgress, WorkflowProgressEngine
from solarops.workflow.tracking import filter_customers, headline_status, summarize

logger = logging.getLogger(__name__)

router = APIRouter(tags=["workflow"])

engine = WorkflowProgressEngine()


def _step_response(item: StepProgress) -> StepStatusResponse:
    task = item.task
    return StepStatusResponse(
        key=item.step.key,
        label=item.step.label,
        phase_id=item.step.phase_id,
        status=item.status,
        badge=item.status.badge,
        task_id=task.id if task else None,
        assigned_to_name=task.assigned_to_name if task else None,
        assigned_to_role=task.assigned_to_role if task else None,
        task_created_at=task.created_at if task else None,
    )


def _progress_response(customer: CustomerAggregate, progress: CustomerProgress) -> CustomerProgressResponse:
    return CustomerProgressResponse(
        customer_id=customer.id,
        applicant_name=customer.applicant_name,
        overall_percent=progress.overall_percent,
        headline=headline_status(progress.overall_percent),
        steps=[_step_response(item) for item in progress.steps],
        phases=[
            PhaseProgressResponse(
                phase_id=phase.phase_id,
                label=phase.label,
                completed_count=phase.completed_count,
                applicable_count=phase.applicable_count,
                fraction=phase.fraction,
                percent=phase.percent,
                all_done=phase.all_done,
                has_in_progress=phase.has_in_progress,
                collapsed=phase.phase_id in progress.collapsed_phase_ids,
            )
            for phase in progress.phases
        ],
    )


@router.get("/workflow/pipeline", response_model=PipelineResponse)
def get_pipeline() -> PipelineResponse:
    return PipelineResponse(
        step_count=len(engine.steps),
        phases=[
            PipelinePhaseResponse(
                id=phase.id,
                label=phase.label,
                steps=[
                    PipelineStepResponse(
                        key=step.key,
                        label=step.label,
                        phase_id=step.phase_id,
                        conditional=step.is_conditional,
                    )
                    for step in engine.pipeline.phase_steps(phase.id)
                ],
            )
            for phase in engine.phases
        ],
    )


@router.post("/workflow/progress", response_model=CustomerProgressResponse)
def customer_progress(customer: CustomerAggregate) -> CustomerProgressResponse:
    progress = engine.snapshot(customer)
    logger.info(
        "workflow.progress.computed",
        extra={
            "event": "workflow.progress.computed",
            "customer_id": customer.id,
            "task_count": len(customer.tasks),
            "overall_percent": progress.overall_percent,
        },
    )
    return _progress_response(customer, progress)


@router.post("/workflow/progress/{step_key}", response_model=StepStatusResponse)
def step_status(step_key: str, customer: CustomerAggregate) -> StepStatusResponse:
    try:
        step = engine.get_step(step_key)
    except UnknownStepError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    by_key = {item.step.key: item for item in engine.step_progress(customer)}
    return _step_response(by_key[step.key])


@router.post("/workflow/tracker", response_model=TrackerResponse)
def tracker(
    customers: list[CustomerAggregate],
    search: str = "",
    bucket: TrackingBucket = TrackingBucket.ALL,
) -> TrackerResponse:
    cfg = get_config()
    if len(customers) > cfg.TRACKER_MAX_CUSTOMERS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"At most {cfg.TRACKER_MAX_CUSTOMERS} customers per request.",
        )

    rows = []
    for customer in filter_customers(engine, customers, search=search.strip(), bucket=bucket):
        percent = engine.overall_progress(customer)
        rows.append(
            TrackerRow(
                customer_id=customer.id,
                applicant_name=customer.applicant_name,
                mobile_number=customer.mobile_number,
                district=customer.district,
                overall_percent=percent,
                headline=headline_status(percent),
            )
        )
    summary = summarize(engine, customers)
    return TrackerResponse(
        items=rows,
        summary=TrackerSummaryResponse(
            total=summary.total,
            completed=summary.completed,
            in_progress=summary.in_progress,
            pending=summary.pending,
        ),
    )

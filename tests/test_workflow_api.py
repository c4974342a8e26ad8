from __future__ import annotations

import pytest
from fastapi import HTTPException

from solarops.api.v1 import health, tasks, workflow
from solarops.core.enums import EffectiveStatus, TaskStatus, TrackingBucket
from solarops.schemas.progress import TransitionCheckRequest


def test_health_endpoint_reports_pipeline():
    response = health.health()
    assert response["status"] == "ok"
    assert response["service"] == "SolarOps"
    assert response["pipeline_steps"] == 25


def test_pipeline_endpoint_lists_phases_in_order():
    response = workflow.get_pipeline()
    assert response.step_count == 25
    assert [phase.id for phase in response.phases][:2] == ["onboarding", "registration_compliance"]
    registration = response.phases[1]
    assert [step.key for step in registration.steps if step.conditional] == [
        "cot_request",
        "name_correction_request",
        "load_request",
        "finance_registration",
        "submit_finance_to_bank",
    ]


def test_progress_endpoint_returns_full_snapshot(make_customer):
    customer = make_customer(
        tasks=[
            {
                "work_type": "customer_data_gathering",
                "status": "completed",
                "assigned_to_name": "Kiran",
                "assigned_to_role": "field_executive",
                "created_at": "2025-01-10T09:30:00Z",
            },
            {"work_type": "complete_registration", "status": "inprogress"},
        ]
    )
    response = workflow.customer_progress(customer)

    assert response.customer_id == 101
    assert response.overall_percent == 5
    assert response.headline == "ACTIVE"
    assert len(response.steps) == 25
    first = response.steps[0]
    assert first.status is EffectiveStatus.COMPLETED
    assert first.badge == "✓"
    assert first.assigned_to_name == "Kiran"
    phases = {phase.phase_id: phase for phase in response.phases}
    assert phases["onboarding"].collapsed is True
    assert phases["registration_compliance"].has_in_progress is True
    assert phases["registration_compliance"].fraction == "0/1"


def test_step_status_endpoint(make_customer):
    response = workflow.step_status("finance_registration", make_customer())
    assert response.status is EffectiveStatus.NOT_APPLICABLE
    assert response.badge == "N/A"


def test_step_status_endpoint_rejects_unknown_step(make_customer):
    with pytest.raises(HTTPException) as exc:
        workflow.step_status("paint_the_roof", make_customer())
    assert exc.value.status_code == 404


def test_tracker_endpoint_filters_and_summarizes(make_customer):
    customers = [
        make_customer(id=1, applicant_name="Anita Sharma", tasks=[("customer_data_gathering", "completed")]),
        make_customer(id=2, applicant_name="Vikram Singh"),
    ]
    response = workflow.tracker(customers, search="", bucket=TrackingBucket.IN_PROGRESS)

    assert [row.customer_id for row in response.items] == [1]
    assert response.items[0].headline == "ACTIVE"
    assert response.summary.total == 2
    assert response.summary.in_progress == 1
    assert response.summary.pending == 1


def test_tracker_endpoint_enforces_batch_limit(monkeypatch, make_customer):
    class _Cfg:
        TRACKER_MAX_CUSTOMERS = 1

    monkeypatch.setattr(workflow, "get_config", lambda: _Cfg())
    with pytest.raises(HTTPException) as exc:
        workflow.tracker([make_customer(id=1), make_customer(id=2)], search="", bucket=TrackingBucket.ALL)
    assert exc.value.status_code == 400


def test_transition_check_endpoint():
    allowed = tasks.check_transition(TransitionCheckRequest(current="pending", target="inprogress"))
    assert allowed.allowed is True
    assert allowed.message is None
    assert allowed.next_allowed == [TaskStatus.IN_PROGRESS]

    rejected = tasks.check_transition(TransitionCheckRequest(current="completed", target="pending"))
    assert rejected.allowed is False
    assert "unidirectional" in rejected.message

from __future__ import annotations

import pytest

from solarops.schemas.customers import CustomerAggregate
from solarops.workflow.engine import WorkflowProgressEngine

# Cash customer who needs no COT, name correction, or load enhancement.
CASH_CUSTOMER_ATTRS = {
    "id": 101,
    "applicant_name": "Ramesh Kumar",
    "mobile_number": "9876543210",
    "district": "Jaipur",
    "payment_mode": "Cash",
    "special_finance_required": "No",
    "cot_required": "Not Required",
    "name_correction_required": "Not Required",
    "load_enhancement_required": "Not Required",
}


def _task_payload(item, position: int) -> dict:
    if isinstance(item, dict):
        return {"id": position, **item}
    work_type, status = item
    return {"id": position, "work_type": work_type, "status": status}


@pytest.fixture
def engine() -> WorkflowProgressEngine:
    return WorkflowProgressEngine()


@pytest.fixture
def make_customer():
    """Build a customer aggregate; tasks are dicts or (work_type, status) pairs."""

    def _make(tasks=(), **overrides) -> CustomerAggregate:
        payload = {**CASH_CUSTOMER_ATTRS, **overrides}
        payload["tasks"] = [_task_payload(item, position) for position, item in enumerate(tasks, start=1)]
        return CustomerAggregate.model_validate(payload)

    return _make

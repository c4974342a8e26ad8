from __future__ import annotations

import logging

from solarops.core.enums import EffectiveStatus
from solarops.schemas.customers import TaskRecord
from solarops.workflow.task_index import TaskIndex


def _task(task_id, status, created_at=None, work_type="inspection"):
    return TaskRecord(id=task_id, work_type=work_type, status=status, created_at=created_at)


def test_most_recently_created_duplicate_wins():
    index = TaskIndex.from_tasks(
        [
            _task(1, "completed", "2025-03-02T10:00:00Z"),
            _task(2, "pending", "2025-01-15T08:00:00Z"),
        ]
    )
    assert index.get("inspection").id == 1
    assert index.duplicates == {"inspection": 2}


def test_later_position_breaks_timestamp_ties():
    index = TaskIndex.from_tasks(
        [
            _task(1, "pending", "2025-03-02T10:00:00Z"),
            _task(2, "inprogress", "2025-03-02T10:00:00Z"),
        ]
    )
    assert index.get("inspection").id == 2


def test_missing_timestamp_sorts_oldest():
    index = TaskIndex.from_tasks([_task(1, "completed", "2025-03-02T10:00:00"), _task(2, "pending")])
    assert index.get("inspection").id == 1


def test_naive_and_aware_timestamps_compare_as_utc():
    index = TaskIndex.from_tasks(
        [
            _task(1, "pending", "2025-03-02T10:00:00"),
            _task(2, "completed", "2025-03-02T09:00:00+00:00"),
        ]
    )
    assert index.get("inspection").id == 1


def test_selection_does_not_depend_on_input_order():
    older = _task(1, "pending", "2025-01-01T00:00:00Z")
    newer = _task(2, "completed", "2025-02-01T00:00:00Z")
    assert TaskIndex.from_tasks([older, newer]).get("inspection").id == 2
    assert TaskIndex.from_tasks([newer, older]).get("inspection").id == 2


def test_duplicates_are_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="solarops.workflow.task_index"):
        TaskIndex.from_tasks([_task(1, "pending"), _task(2, "completed")], customer_id=7)
    assert any(getattr(record, "event", None) == "workflow.tasks.duplicate_work_type" for record in caplog.records)


def test_unknown_work_types_are_dropped_when_filtered():
    index = TaskIndex.from_tasks(
        [_task(1, "completed", work_type="site_survey"), _task(2, "pending")],
        known_work_types={"inspection"},
    )
    assert "site_survey" not in index
    assert len(index) == 1


def test_engine_uses_newest_duplicate(engine, make_customer):
    customer = make_customer(
        tasks=[
            {"work_type": "inspection", "status": "completed", "created_at": "2025-04-01T09:00:00Z"},
            {"work_type": "inspection", "status": "pending", "created_at": "2025-05-01T09:00:00Z"},
        ]
    )
    assert engine.effective_status(customer, "inspection") is EffectiveStatus.PENDING

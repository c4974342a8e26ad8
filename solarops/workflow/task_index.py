"""Per-invocation lookup of a customer's tasks by work type."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from types import MappingProxyType

from solarops.schemas.customers import TaskRecord

logger = logging.getLogger(__name__)


def _created_sort_key(task: TaskRecord) -> datetime:
    if task.created_at is None:
        return datetime.min.replace(tzinfo=timezone.utc)
    if task.created_at.tzinfo is None:
        return task.created_at.replace(tzinfo=timezone.utc)
    return task.created_at


class TaskIndex:
    """Maps each work type to the single task the tracker should display.

    When several tasks share a work type the most recently created one wins.
    Equal or missing timestamps fall back to list position, later wins.
    """

    def __init__(self, tasks: Mapping[str, TaskRecord], duplicates: Mapping[str, int] | None = None) -> None:
        self._tasks = MappingProxyType(dict(tasks))
        self._duplicates = MappingProxyType(dict(duplicates or {}))

    @classmethod
    def from_tasks(
        cls,
        tasks: Iterable[TaskRecord],
        known_work_types: Iterable[str] | None = None,
        customer_id: int | str | None = None,
    ) -> "TaskIndex":
        allowed = set(known_work_types) if known_work_types is not None else None
        selected: dict[str, TaskRecord] = {}
        counts: Counter[str] = Counter()
        ignored = 0

        for task in tasks:
            if allowed is not None and task.work_type not in allowed:
                ignored += 1
                continue
            counts[task.work_type] += 1
            current = selected.get(task.work_type)
            if current is None or _created_sort_key(task) >= _created_sort_key(current):
                selected[task.work_type] = task

        duplicates = {work_type: count for work_type, count in counts.items() if count > 1}
        for work_type, count in duplicates.items():
            logger.warning(
                "workflow.tasks.duplicate_work_type",
                extra={
                    "event": "workflow.tasks.duplicate_work_type",
                    "customer_id": customer_id,
                    "work_type": work_type,
                    "task_count": count,
                },
            )
        if ignored:
            logger.debug(
                "workflow.tasks.unknown_work_type_ignored",
                extra={
                    "event": "workflow.tasks.unknown_work_type_ignored",
                    "customer_id": customer_id,
                    "ignored_count": ignored,
                },
            )
        return cls(selected, duplicates)

    def get(self, work_type: str) -> TaskRecord | None:
        return self._tasks.get(work_type)

    def __contains__(self, work_type: object) -> bool:
        return work_type in self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def duplicates(self) -> Mapping[str, int]:
        return self._duplicates

"""Canonical enum values for workflow tracking."""

from __future__ import annotations

import enum


class TaskStatus(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "inprogress"
    COMPLETED = "completed"

    @classmethod
    def display_labels(cls) -> dict:
        return {
            cls.PENDING.value: "Pending",
            cls.IN_PROGRESS.value: "In Progress",
            cls.COMPLETED.value: "Completed",
        }


class EffectiveStatus(str, enum.Enum):
    """Derived per-step state shown on the workflow stepper."""

    COMPLETED = "completed"
    IN_PROGRESS = "inprogress"
    PENDING = "pending"
    NOT_STARTED = "not_started"
    NOT_APPLICABLE = "not_applicable"

    @classmethod
    def from_task_status(cls, status: TaskStatus) -> "EffectiveStatus":
        return cls(TaskStatus(status).value)

    @property
    def badge(self) -> str:
        return _BADGE_SYMBOLS[self]

    @property
    def legend_label(self) -> str:
        return _LEGEND_LABELS[self]


_BADGE_SYMBOLS = {
    EffectiveStatus.COMPLETED: "✓",
    EffectiveStatus.IN_PROGRESS: "●",
    EffectiveStatus.PENDING: "⏸",
    EffectiveStatus.NOT_STARTED: "○",
    EffectiveStatus.NOT_APPLICABLE: "N/A",
}

_LEGEND_LABELS = {
    EffectiveStatus.COMPLETED: "Completed",
    EffectiveStatus.IN_PROGRESS: "In Progress (Highlighted)",
    EffectiveStatus.PENDING: "Pending",
    EffectiveStatus.NOT_STARTED: "Not Started",
    EffectiveStatus.NOT_APPLICABLE: "Not Required",
}


class TrackingBucket(str, enum.Enum):
    ALL = "all"
    COMPLETED = "completed"
    IN_PROGRESS = "in-progress"
    PENDING = "pending"

"""Task status flow: pending -> inprogress -> completed, never backwards."""

from __future__ import annotations

from solarops.core.enums import TaskStatus
from solarops.orchestration.state_machine import InvalidTransitionError, StateMachine

TASK_STATUS_FLOW = [TaskStatus.PENDING, TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED]

task_status_machine = StateMachine(
    {
        TaskStatus.PENDING: {TaskStatus.IN_PROGRESS},
        TaskStatus.IN_PROGRESS: {TaskStatus.COMPLETED},
        TaskStatus.COMPLETED: set(),
    }
)


def can_transition_to(current: TaskStatus, target: TaskStatus) -> bool:
    return task_status_machine.can_transition(TaskStatus(current), TaskStatus(target))


def next_allowed_statuses(current: TaskStatus) -> list[TaskStatus]:
    allowed = task_status_machine.allowed_targets(TaskStatus(current))
    return [status for status in TASK_STATUS_FLOW if status in allowed]


def transition_error_message(current: TaskStatus, target: TaskStatus) -> str:
    current, target = TaskStatus(current), TaskStatus(target)
    if current == target:
        return "Task is already in this status"
    labels = TaskStatus.display_labels()
    flow = " → ".join(labels[status.value] for status in TASK_STATUS_FLOW)
    return (
        f"Cannot move task from {labels[current.value]} to {labels[target.value]}. "
        f"Task flow is unidirectional: {flow}"
    )


def assert_task_transition(current: TaskStatus, target: TaskStatus) -> None:
    if not can_transition_to(current, target):
        raise InvalidTransitionError(transition_error_message(current, target))

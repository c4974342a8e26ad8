"""Workflow progress engine.

Derives the effective status of every pipeline step for one customer, rolls
the statuses up into phase and overall completion, and decides which phases
start collapsed when a customer's detail view opens. Everything here is a pure
function of ``(pipeline, customer)``; nothing is cached between calls.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from solarops.core.enums import EffectiveStatus
from solarops.schemas.customers import CustomerAggregate, TaskRecord
from solarops.workflow.pipeline import Phase, PipelineDefinition, Step, get_default_pipeline
from solarops.workflow.task_index import TaskIndex


def percent_complete(completed: int, applicable: int) -> int:
    """Whole-number percentage rounded half-up; 0 when nothing is applicable."""
    if applicable <= 0:
        return 0
    return (200 * completed + applicable) // (2 * applicable)


@dataclass(frozen=True)
class StepProgress:
    step: Step
    status: EffectiveStatus
    task: TaskRecord | None = None

    @property
    def is_applicable(self) -> bool:
        return self.status is not EffectiveStatus.NOT_APPLICABLE


@dataclass(frozen=True)
class PhaseProgress:
    phase_id: str
    label: str
    completed_count: int
    applicable_count: int
    percent: int
    all_done: bool
    has_in_progress: bool

    @property
    def fraction(self) -> str:
        return f"{self.completed_count}/{self.applicable_count}"


@dataclass(frozen=True)
class CustomerProgress:
    customer_id: int | str
    overall_percent: int
    steps: tuple[StepProgress, ...]
    phases: tuple[PhaseProgress, ...]
    collapsed_phase_ids: frozenset[str]

    def status_of(self, step_key: str) -> EffectiveStatus:
        for item in self.steps:
            if item.step.key == step_key:
                return item.status
        raise KeyError(step_key)


def _summarize_phase(phase: Phase, items: Iterable[StepProgress]) -> PhaseProgress:
    completed = applicable = 0
    in_progress = False
    for item in items:
        if item.status is EffectiveStatus.IN_PROGRESS:
            in_progress = True
        if not item.is_applicable:
            continue
        applicable += 1
        if item.status is EffectiveStatus.COMPLETED:
            completed += 1
    return PhaseProgress(
        phase_id=phase.id,
        label=phase.label,
        completed_count=completed,
        applicable_count=applicable,
        percent=percent_complete(completed, applicable),
        all_done=applicable > 0 and completed == applicable,
        has_in_progress=in_progress,
    )


class WorkflowProgressEngine:
    """Read-only query surface over a validated pipeline definition."""

    def __init__(self, pipeline: PipelineDefinition | None = None) -> None:
        self.pipeline = pipeline or get_default_pipeline()

    @property
    def steps(self) -> tuple[Step, ...]:
        return self.pipeline.steps

    @property
    def phases(self) -> tuple[Phase, ...]:
        return self.pipeline.phases

    def get_step(self, step_key: str) -> Step:
        return self.pipeline.get_step(step_key)

    def get_phase(self, phase_id: str) -> Phase:
        return self.pipeline.get_phase(phase_id)

    def is_conditional(self, step_key: str) -> bool:
        return self.pipeline.is_conditional(step_key)

    def index_tasks(self, customer: CustomerAggregate) -> TaskIndex:
        return TaskIndex.from_tasks(
            customer.tasks,
            known_work_types=self.pipeline.step_index.keys(),
            customer_id=customer.id,
        )

    def _derive(self, customer: CustomerAggregate, step: Step, index: TaskIndex) -> StepProgress:
        task = index.get(step.key)
        if task is not None:
            # An existing task always shows its real status, even if the
            # customer's attributes no longer require the step.
            return StepProgress(step=step, status=EffectiveStatus.from_task_status(task.status), task=task)
        if step.rule is not None and not self.pipeline.rules[step.rule].is_required(customer):
            return StepProgress(step=step, status=EffectiveStatus.NOT_APPLICABLE)
        return StepProgress(step=step, status=EffectiveStatus.NOT_STARTED)

    def effective_status(self, customer: CustomerAggregate, step_key: str) -> EffectiveStatus:
        step = self.pipeline.get_step(step_key)
        return self._derive(customer, step, self.index_tasks(customer)).status

    def step_progress(self, customer: CustomerAggregate) -> tuple[StepProgress, ...]:
        index = self.index_tasks(customer)
        return tuple(self._derive(customer, step, index) for step in self.pipeline.steps)

    def overall_progress(self, customer: CustomerAggregate) -> int:
        items = [item for item in self.step_progress(customer) if item.is_applicable]
        completed = sum(1 for item in items if item.status is EffectiveStatus.COMPLETED)
        return percent_complete(completed, len(items))

    def phase_progress(self, customer: CustomerAggregate, phase_id: str) -> PhaseProgress:
        phase = self.pipeline.get_phase(phase_id)
        index = self.index_tasks(customer)
        items = (self._derive(customer, self.pipeline.step_index[key], index) for key in phase.step_keys)
        return _summarize_phase(phase, items)

    def all_phase_progress(self, customer: CustomerAggregate) -> tuple[PhaseProgress, ...]:
        return self._phases_from(self.step_progress(customer))

    def initial_collapse_set(self, customer: CustomerAggregate) -> frozenset[str]:
        return frozenset(phase.phase_id for phase in self.all_phase_progress(customer) if phase.all_done)

    def _phases_from(self, items: tuple[StepProgress, ...]) -> tuple[PhaseProgress, ...]:
        by_key = {item.step.key: item for item in items}
        return tuple(
            _summarize_phase(phase, (by_key[key] for key in phase.step_keys))
            for phase in self.pipeline.phases
        )

    def snapshot(self, customer: CustomerAggregate) -> CustomerProgress:
        """Compute every step, phase and the overall figure in one pass."""
        items = self.step_progress(customer)
        phases = self._phases_from(items)
        applicable = [item for item in items if item.is_applicable]
        completed = sum(1 for item in applicable if item.status is EffectiveStatus.COMPLETED)
        return CustomerProgress(
            customer_id=customer.id,
            overall_percent=percent_complete(completed, len(applicable)),
            steps=items,
            phases=phases,
            collapsed_phase_ids=frozenset(phase.phase_id for phase in phases if phase.all_done),
        )

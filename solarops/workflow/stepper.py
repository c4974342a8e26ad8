"""Collapse state of the phase-grouped stepper for one open detail view."""

from __future__ import annotations

from solarops.core.exceptions import UnknownPhaseError
from solarops.schemas.customers import CustomerAggregate
from solarops.workflow.engine import WorkflowProgressEngine


class StepperViewState:
    """Per-view memory of which phases are collapsed.

    Seeded once from the engine when the view opens. After that only the
    user's toggles change it; refreshed task data does not.
    """

    def __init__(self, phase_ids: tuple[str, ...], collapsed: frozenset[str]) -> None:
        self._phase_ids = phase_ids
        self._collapsed = set(collapsed) & set(phase_ids)

    @classmethod
    def open(cls, engine: WorkflowProgressEngine, customer: CustomerAggregate) -> "StepperViewState":
        phase_ids = tuple(phase.id for phase in engine.phases)
        return cls(phase_ids, engine.initial_collapse_set(customer))

    def _check(self, phase_id: str) -> None:
        if phase_id not in self._phase_ids:
            raise UnknownPhaseError(phase_id)

    def is_collapsed(self, phase_id: str) -> bool:
        self._check(phase_id)
        return phase_id in self._collapsed

    def toggle(self, phase_id: str) -> bool:
        """Flip one phase and return its new collapsed flag."""
        self._check(phase_id)
        if phase_id in self._collapsed:
            self._collapsed.discard(phase_id)
            return False
        self._collapsed.add(phase_id)
        return True

    @property
    def collapsed(self) -> frozenset[str]:
        return frozenset(self._collapsed)

    @property
    def expanded(self) -> tuple[str, ...]:
        return tuple(phase_id for phase_id in self._phase_ids if phase_id not in self._collapsed)

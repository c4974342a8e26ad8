"""Canonical state transition helpers for workflow entities."""

from __future__ import annotations

from collections.abc import Hashable, Mapping


class InvalidTransitionError(ValueError):
    """Raised when a disallowed state transition is attempted."""


class StateMachine:
    """Forward-only transition table; staying in the same state is always allowed."""

    def __init__(self, transitions: Mapping[Hashable, set]) -> None:
        self._transitions = {state: frozenset(targets) for state, targets in transitions.items()}

    def allowed_targets(self, current: Hashable) -> frozenset:
        return self._transitions.get(current, frozenset())

    def can_transition(self, current: Hashable, target: Hashable) -> bool:
        return current == target or target in self.allowed_targets(current)

    def assert_transition(self, current: Hashable, target: Hashable) -> None:
        if not self.can_transition(current=current, target=target):
            raise InvalidTransitionError(f"Transition not allowed: {current} -> {target}")

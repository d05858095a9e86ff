"""Busy state for the three mutating operations.

Generate, regenerate and edit each have their own state machine
(idle, or active on an optional slot index). ``OperationGate.busy`` is the
combined projection every mutating operation checks before it starts. At most
one operation is active at a time across the whole result set.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class Operation(Enum):
    GENERATE = "generate"
    REGENERATE = "regenerate"
    EDIT = "edit"


@dataclass(frozen=True)
class Activity:
    """An operation in flight, optionally bound to one slot."""

    operation: Operation
    index: int | None = None


class GateBusyError(RuntimeError):
    """An operation tried to start while another one was in flight."""


class OperationGate:
    """Single-writer discipline for the shared result set."""

    def __init__(self):
        self._states: dict[Operation, Activity | None] = {op: None for op in Operation}

    @property
    def busy(self) -> bool:
        return any(activity is not None for activity in self._states.values())

    @property
    def current(self) -> Activity | None:
        """The activity in flight, if any."""
        for activity in self._states.values():
            if activity is not None:
                return activity
        return None

    def state(self, operation: Operation) -> Activity | None:
        """State of one operation's machine (None when idle)."""
        return self._states[operation]

    @contextmanager
    def hold(self, operation: Operation, index: int | None = None) -> Iterator[Activity]:
        """Move ``operation`` to active for the duration of the block.

        Callers check ``busy`` first and treat a busy gate as a no-op; entering
        a busy gate is a bug.
        """
        if self.busy:
            raise GateBusyError(f"Cannot start {operation.value}: {self.current} in progress")

        activity = Activity(operation, index)
        self._states[operation] = activity
        try:
            yield activity
        finally:
            self._states[operation] = None

"""A small state machine driving callbacks on an owner object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


@dataclass
class State(Generic[T]):
    """Callbacks of one state; each is optional.

    ``update`` runs every frame with the owner and the frame time, ``coroutine``
    runs when the state is entered and ``on_end`` when it is left.
    """

    update: Callable[[T, float], None] | None = None
    coroutine: Callable[[T], Any] | None = None
    on_end: Callable[[T], None] | None = None


class StateMachine(Generic[T]):
    """Holds up to ``MAX_STATE`` states; state changes apply on the next update."""

    MAX_STATE = 32

    def __init__(self) -> None:
        self._states: list[State[T]] = [State() for _ in range(self.MAX_STATE)]
        self._current = 0
        self._next: int | None = None
        self._updating = False

    @property
    def state(self) -> int:
        """Id of the current state."""
        return self._current

    def _check_id(self, state_id: int) -> None:
        if not 0 <= state_id < self.MAX_STATE:
            raise ValueError(f"state id {state_id} outside 0..{self.MAX_STATE - 1}")

    def add_state(self, state_id: int, state: State[T]) -> None:
        """Register ``state`` under ``state_id``."""
        if self._updating:
            raise RuntimeError("cannot add states while the state machine is updating")
        self._check_id(state_id)
        self._states[state_id] = state

    def set_state(self, state_id: int) -> None:
        """Switch to ``state_id`` at the next update."""
        self._check_id(state_id)
        self._next = state_id

    def update(self, owner: T, dt: float) -> None:
        """Apply a pending state change, then run the current state's update."""
        if self._updating:
            raise RuntimeError("state machine is already updating")
        self._updating = True
        try:
            pending, self._next = self._next, None
            if pending is not None:
                if pending != self._current:
                    leaving = self._states[self._current]
                    if leaving.on_end is not None:
                        leaving.on_end(owner)
                    entering = self._states[pending]
                    if entering.coroutine is not None:
                        entering.coroutine(owner)
                self._current = pending
            current = self._states[self._current]
            if current.update is not None:
                current.update(owner, dt)
        finally:
            self._updating = False
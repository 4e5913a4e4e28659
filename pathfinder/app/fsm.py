"""Finite State Machine for the run/edit cycle."""

from enum import Enum
from typing import Callable, Dict, Optional


class RunState(Enum):
    """States of the interactive session."""
    IDLE = "idle"
    RUNNING = "running"


# Each state has exactly one successor
_NEXT_STATE = {
    RunState.IDLE: RunState.RUNNING,
    RunState.RUNNING: RunState.IDLE,
}

_DESCRIPTIONS = {
    RunState.IDLE: "Ready to edit",
    RunState.RUNNING: "Search running",
}


class RunStateMachine:
    """
    Gates grid edits against search runs.

    IDLE -> RUNNING when find path is accepted; RUNNING -> IDLE when the
    reveal completes, fails or is cancelled. Entry callbacks receive the
    context passed to the transition.
    """

    def __init__(self):
        self._current_state = RunState.IDLE
        self._on_enter: Dict[RunState, Callable[[Optional[dict]], None]] = {}

    @property
    def current_state(self) -> RunState:
        return self._current_state

    def transition_to(self, target_state: RunState, context: dict = None) -> bool:
        """Move to ``target_state``; returns False if it is not the successor."""
        if _NEXT_STATE[self._current_state] is not target_state:
            return False

        self._current_state = target_state
        callback = self._on_enter.get(target_state)
        if callback is not None:
            callback(context)
        return True

    def on_state_enter(self, state: RunState, callback: Callable[[Optional[dict]], None]):
        """Register the callback run after entering ``state``."""
        self._on_enter[state] = callback

    def is_idle(self) -> bool:
        return self._current_state == RunState.IDLE

    def is_running(self) -> bool:
        return self._current_state == RunState.RUNNING

    def start(self, context: dict = None) -> bool:
        return self.transition_to(RunState.RUNNING, context)

    def finish(self, context: dict = None) -> bool:
        return self.transition_to(RunState.IDLE, context)

    def get_state_description(self) -> str:
        return _DESCRIPTIONS[self._current_state]

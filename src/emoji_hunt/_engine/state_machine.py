# Area: Engine
"""
emoji_hunt._engine.state_machine — Session State Machine
========================================================

Tracks the lifecycle state of one game session. Gameplay operations
consult it before mutating anything, so out-of-state calls become
no-ops instead of errors.
"""

from typing import Optional
import logging

from .enums import SessionState, SessionEvent

logger = logging.getLogger("emoji_hunt.engine.state_machine")


# Valid state transitions: {current_state: {event: next_state}}
TRANSITIONS = {
    SessionState.IDLE: {
        SessionEvent.START: SessionState.RUNNING,
    },
    SessionState.RUNNING: {
        SessionEvent.START: SessionState.RUNNING,
        SessionEvent.PAUSE: SessionState.PAUSED,
        SessionEvent.ROUND_WON: SessionState.RUNNING,
        SessionEvent.GAME_COMPLETE: SessionState.ENDED,
        SessionEvent.ROUND_LOST: SessionState.ENDED,
    },
    SessionState.PAUSED: {
        SessionEvent.START: SessionState.RUNNING,
        SessionEvent.RESUME: SessionState.RUNNING,
    },
    SessionState.ENDED: {
        SessionEvent.START: SessionState.RUNNING,
    },
}


class SessionStateMachine:
    """
    State machine for the game session lifecycle.

    Attributes:
        current_state: The current state of the session
    """

    def __init__(self):
        """Initialize state machine in IDLE."""
        self.current_state = SessionState.IDLE

    def can_transition(self, event: SessionEvent) -> bool:
        """Check if a transition is valid from current state."""
        if event == SessionEvent.RESET:
            return True
        valid_transitions = TRANSITIONS.get(self.current_state, {})
        return event in valid_transitions

    def transition(self, event: SessionEvent) -> Optional[SessionState]:
        """
        Execute a state transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new state, or None if the event is not valid from the
            current state (the state is left unchanged)
        """
        if event == SessionEvent.RESET:
            self.reset()
            return self.current_state

        if not self.can_transition(event):
            logger.debug(
                f"Ignored event {event.value} in state {self.current_state.value}"
            )
            return None

        previous = self.current_state
        self.current_state = TRANSITIONS[previous][event]
        if previous != self.current_state:
            logger.info(
                f"Session: {previous.value} → {self.current_state.value} ({event.value})"
            )
        return self.current_state

    @property
    def is_running(self) -> bool:
        return self.current_state == SessionState.RUNNING

    @property
    def is_paused(self) -> bool:
        return self.current_state == SessionState.PAUSED

    def reset(self) -> None:
        """Reset state machine to IDLE."""
        self.current_state = SessionState.IDLE

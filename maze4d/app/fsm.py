"""Finite State Machine for game session phases."""

from enum import Enum
from typing import Callable, Optional, Set


class GameState(Enum):
    """States of a game session."""
    IDLE = "idle"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class GameStateMachine:
    """
    Finite State Machine for managing game session states.

    State Transitions:
    IDLE -> PLAYING (when a new game starts)
    PLAYING -> WON (when the player leaves through the exit)
    PLAYING -> LOST (when a ghost catches the player)
    PLAYING -> IDLE (when the session is reset)
    WON -> IDLE, LOST -> IDLE (when the session is reset)
    """

    def __init__(self):
        self._current_state = GameState.IDLE
        self._state_callbacks = {}
        self._valid_transitions = self._build_transition_map()

    def _build_transition_map(self) -> dict[GameState, Set[GameState]]:
        """Build the valid state transition map."""
        return {
            GameState.IDLE: {GameState.PLAYING},
            GameState.PLAYING: {GameState.WON, GameState.LOST, GameState.IDLE},
            GameState.WON: {GameState.IDLE},
            GameState.LOST: {GameState.IDLE},
        }

    @property
    def current_state(self) -> GameState:
        """Get the current state."""
        return self._current_state

    def can_transition_to(self, target_state: GameState) -> bool:
        """Check if transition to target state is valid."""
        return target_state in self._valid_transitions.get(self._current_state, set())

    def transition_to(self, target_state: GameState, context: dict = None) -> bool:
        """
        Attempt to transition to the target state.

        Args:
            target_state: The state to transition to
            context: Optional context data passed to the entry callback

        Returns:
            True if transition was successful, False otherwise
        """
        if not self.can_transition_to(target_state):
            return False

        self._current_state = target_state

        if target_state in self._state_callbacks:
            self._state_callbacks[target_state](context)

        return True

    def on_state_enter(self, state: GameState, callback: Callable[[Optional[dict]], None]):
        """Register a callback for when entering a specific state."""
        self._state_callbacks[state] = callback

    def is_playing(self) -> bool:
        return self._current_state == GameState.PLAYING

    def is_finished(self) -> bool:
        """Check if the game has ended (won or lost)."""
        return self._current_state in [GameState.WON, GameState.LOST]

    def start(self, context: dict = None) -> bool:
        return self.transition_to(GameState.PLAYING, context)

    def win(self, context: dict = None) -> bool:
        return self.transition_to(GameState.WON, context)

    def lose(self, context: dict = None) -> bool:
        return self.transition_to(GameState.LOST, context)

    def reset_to_idle(self, context: dict = None) -> bool:
        """Reset to idle state."""
        return self.transition_to(GameState.IDLE, context)

    def get_state_description(self) -> str:
        """Get a human-readable description of the current state."""
        descriptions = {
            GameState.IDLE: "Ready to start",
            GameState.PLAYING: "Game in progress",
            GameState.WON: "Escaped the maze",
            GameState.LOST: "Caught by a ghost",
        }
        return descriptions.get(self._current_state, "Unknown state")

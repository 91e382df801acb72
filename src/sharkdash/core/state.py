"""
State machine for the Shark Dash game flow.

Phases:
    COUNTDOWN: 3-2-1-GO before play; physics settles, nothing scrolls
    PLAYING: Full gameplay ticks (physics, obstacles, collision, score)
    CELEBRATING: Milestone interlude; gameplay suspended
    GAME_OVER: Loop halted until an explicit restart

Every accepted transition bumps the epoch. Scheduled continuations capture
the epoch when they are armed and must do nothing once it has moved on.
"""

from enum import Enum, auto
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Game phases."""
    COUNTDOWN = auto()
    PLAYING = auto()
    CELEBRATING = auto()
    GAME_OVER = auto()


PhaseListener = Callable[[GamePhase, GamePhase], None]


class GameStateMachine:
    """
    Manages game phase and transitions.

    Only the transitions listed in VALID_TRANSITIONS are accepted; anything
    else is refused and logged.
    """

    VALID_TRANSITIONS: list[tuple[GamePhase, GamePhase]] = [
        (GamePhase.COUNTDOWN, GamePhase.PLAYING),

        (GamePhase.PLAYING, GamePhase.GAME_OVER),
        (GamePhase.PLAYING, GamePhase.CELEBRATING),

        (GamePhase.CELEBRATING, GamePhase.COUNTDOWN),

        # Restart
        (GamePhase.GAME_OVER, GamePhase.COUNTDOWN),
    ]

    def __init__(self, initial_phase: GamePhase = GamePhase.COUNTDOWN) -> None:
        self._phase = initial_phase
        self._epoch = 0
        self._listeners: list[PhaseListener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.info(f"GameStateMachine initialized with phase: {initial_phase.name}")

    @property
    def phase(self) -> GamePhase:
        """Get current phase."""
        return self._phase

    @property
    def epoch(self) -> int:
        """Monotonic counter bumped on every transition."""
        return self._epoch

    @property
    def allows_gameplay(self) -> bool:
        """Physics, obstacle and collision ticks run only while playing."""
        return self._phase == GamePhase.PLAYING

    @property
    def is_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    def can_transition(self, to_phase: GamePhase) -> bool:
        """Check if transition to given phase is valid."""
        return (self._phase, to_phase) in self._valid_transitions

    def transition(self, to_phase: GamePhase) -> bool:
        """
        Attempt to transition to a new phase.

        Args:
            to_phase: Target phase

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_phase):
            logger.warning(
                f"Invalid transition: {self._phase.name} -> {to_phase.name}"
            )
            return False

        old_phase = self._phase
        self._phase = to_phase
        self._epoch += 1

        logger.info(
            f"Phase transition: {old_phase.name} -> {to_phase.name} (epoch {self._epoch})"
        )

        self._notify(old_phase, to_phase)
        return True

    def invalidate(self) -> int:
        """Bump the epoch without changing phase (e.g. re-entering a countdown)."""
        self._epoch += 1
        return self._epoch

    def is_current(self, epoch: int) -> bool:
        """True if a continuation armed at ``epoch`` may still run."""
        return epoch == self._epoch

    def add_listener(self, callback: PhaseListener) -> None:
        """Add a phase change listener."""
        self._listeners.append(callback)

    def _notify(self, old_phase: GamePhase, new_phase: GamePhase) -> None:
        for listener in self._listeners:
            try:
                listener(old_phase, new_phase)
            except Exception as e:
                logger.error(f"Error in phase listener: {e}")

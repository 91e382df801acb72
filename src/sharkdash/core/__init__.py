"""Core framework components for Shark Dash."""

from .state import GamePhase, GameStateMachine
from .events import EventBus, Event, EventType
from .scheduler import FrameScheduler

__all__ = [
    "GamePhase",
    "GameStateMachine",
    "EventBus",
    "Event",
    "EventType",
    "FrameScheduler",
]

"""Shared fixtures for Shark Dash tests."""

import random

import pytest

from sharkdash.config.settings import Settings
from sharkdash.core.events import EventBus
from sharkdash.core.state import GamePhase
from sharkdash.game.physics import PlayerBody
from sharkdash.game.session import GameSession

FRAME_MS = 1000.0 / 60


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def body(settings) -> PlayerBody:
    return PlayerBody.from_settings(settings)


@pytest.fixture
def make_session(settings):
    """Build a started-or-not session with a seeded obstacle generator."""

    def _make(seed: int = 7, custom: Settings | None = None, start: bool = True) -> GameSession:
        session = GameSession(
            settings=custom or settings,
            event_bus=EventBus(),
            rng=random.Random(seed),
        )
        if start:
            session.start()
        return session

    return _make


def run_until(session: GameSession, predicate, max_frames: int = 20000, steer: bool = False) -> int:
    """Tick the session until ``predicate()`` holds. Returns frames ticked."""
    for frame in range(max_frames):
        if predicate():
            return frame
        if steer and session.phase == GamePhase.PLAYING:
            steer_through_gap(session)
        session.tick(FRAME_MS)
    raise AssertionError(f"condition not reached within {max_frames} frames")


def steer_through_gap(session: GameSession) -> None:
    """Park the body in the middle of the next gap with no velocity."""
    body = session.body
    ahead = [o for o in session.obstacles if o.right >= body.x]
    if ahead:
        target = ahead[0]
        body.y = target.top + (target.gap_height - body.height) / 2
    else:
        body.y = session.settings.playfield.height / 2 - body.height / 2
    body.velocity = 0.0

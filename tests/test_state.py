"""Tests for the game phase state machine."""

from sharkdash.core.state import GamePhase, GameStateMachine


def test_starts_in_countdown():
    sm = GameStateMachine()
    assert sm.phase == GamePhase.COUNTDOWN
    assert sm.epoch == 0
    assert not sm.allows_gameplay


def test_full_cycle():
    sm = GameStateMachine()
    assert sm.transition(GamePhase.PLAYING)
    assert sm.allows_gameplay
    assert sm.transition(GamePhase.CELEBRATING)
    assert sm.transition(GamePhase.COUNTDOWN)
    assert sm.transition(GamePhase.PLAYING)
    assert sm.transition(GamePhase.GAME_OVER)
    assert sm.is_over
    assert sm.transition(GamePhase.COUNTDOWN)
    assert sm.epoch == 6


def test_invalid_transition_is_refused():
    sm = GameStateMachine()
    assert not sm.transition(GamePhase.GAME_OVER)
    assert not sm.transition(GamePhase.CELEBRATING)
    assert sm.phase == GamePhase.COUNTDOWN
    assert sm.epoch == 0

    sm.transition(GamePhase.PLAYING)
    sm.transition(GamePhase.GAME_OVER)
    assert not sm.can_transition(GamePhase.PLAYING)
    assert not sm.can_transition(GamePhase.CELEBRATING)


def test_epoch_guards_continuations():
    sm = GameStateMachine()
    armed = sm.epoch
    assert sm.is_current(armed)

    sm.transition(GamePhase.PLAYING)
    assert not sm.is_current(armed)

    armed = sm.epoch
    sm.invalidate()
    assert sm.phase == GamePhase.PLAYING
    assert not sm.is_current(armed)


def test_listeners_get_old_and_new_phase():
    sm = GameStateMachine()
    seen = []
    sm.add_listener(lambda old, new: seen.append((old, new)))
    sm.transition(GamePhase.PLAYING)
    assert seen == [(GamePhase.COUNTDOWN, GamePhase.PLAYING)]


def test_listener_errors_do_not_block_transition():
    sm = GameStateMachine()
    seen = []

    def broken(old, new):
        raise RuntimeError("boom")

    sm.add_listener(broken)
    sm.add_listener(lambda old, new: seen.append(new))

    assert sm.transition(GamePhase.PLAYING)
    assert seen == [GamePhase.PLAYING]

    sm.transition(GamePhase.GAME_OVER)
    assert seen == [GamePhase.PLAYING, GamePhase.GAME_OVER]

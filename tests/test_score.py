"""Tests for scoring and milestones."""

from sharkdash.game.obstacles import Obstacle
from sharkdash.game.score import ScoreTracker


def coral(x: float) -> Obstacle:
    return Obstacle(x=x, top=200, gap_height=232.76, width=80, speed=1.9)


def test_obstacle_scores_once():
    tracker = ScoreTracker()
    passed = coral(20.0)  # right edge 100

    assert not tracker.update([passed], body_x=133.3)
    assert tracker.score == 1
    assert passed.passed

    tracker.update([passed], body_x=133.3)
    assert tracker.score == 1


def test_obstacle_level_with_body_does_not_score():
    tracker = ScoreTracker()
    tracker.update([coral(53.0)], body_x=133.0)
    assert tracker.score == 0


def test_milestone_stops_the_scan():
    tracker = ScoreTracker(milestone_interval=25)
    tracker.score = 24
    first, second = coral(0.0), coral(10.0)

    assert tracker.update([first, second], body_x=133.3)
    assert tracker.score == 25
    assert first.passed
    assert not second.passed

    # The leftover obstacle scores next tick without another milestone
    assert not tracker.update([first, second], body_x=133.3)
    assert tracker.score == 26


def test_zero_is_not_a_milestone():
    tracker = ScoreTracker(milestone_interval=1)
    assert not tracker.is_milestone()
    tracker.score = 3
    assert tracker.is_milestone()

"""Tests for the numpy frame renderer. No window is opened."""

import math

import numpy as np

from sharkdash.config.settings import Settings
from sharkdash.core.state import GamePhase
from sharkdash.graphics.primitives import draw_circle, draw_ellipse, draw_rect, new_buffer
from sharkdash.graphics.renderer import SceneRenderer

from tests.conftest import run_until


def test_draw_rect_clips():
    buffer = new_buffer(10, 10)
    draw_rect(buffer, -5, -5, 8, 8, (255, 0, 0))
    assert (buffer[0, 0] == (255, 0, 0)).all()
    assert (buffer[2, 2] == (255, 0, 0)).all()
    assert (buffer[3, 3] == (0, 0, 0)).all()

    draw_rect(buffer, 20, 20, 5, 5, (0, 255, 0))
    assert not (buffer == (0, 255, 0)).all(axis=2).any()


def test_draw_rect_blends():
    buffer = new_buffer(4, 4)
    draw_rect(buffer, 0, 0, 4, 4, (255, 255, 255), alpha=0.5)
    assert buffer[1, 1].tolist() == [127, 127, 127]


def test_draw_circle_marks_centre_only():
    buffer = new_buffer(20, 20)
    draw_circle(buffer, 10, 10, 3, (0, 0, 255))
    assert buffer[10, 10].tolist() == [0, 0, 255]
    assert buffer[0, 0].tolist() == [0, 0, 0]


def test_frame_shape(settings):
    renderer = SceneRenderer(settings)
    frame = renderer.new_frame()
    assert frame.shape == (600, 400, 3)
    assert frame.dtype == np.uint8


def test_countdown_is_dimmed(settings, make_session):
    session = make_session()
    renderer = SceneRenderer(settings)
    frame = renderer.new_frame()
    renderer.render(session, frame)
    assert frame[5, 5].tolist() == [8, 36, 60]


def test_coral_is_drawn_while_playing(settings, make_session):
    session = make_session()
    run_until(
        session,
        lambda: session.obstacles and session.obstacles[0].x < 300,
    )
    assert session.phase == GamePhase.PLAYING

    renderer = SceneRenderer(settings)
    frame = renderer.new_frame()
    renderer.render(session, frame)

    obstacle = session.obstacles[0]
    assert frame[10, int(obstacle.x) + 40].tolist() == list(SceneRenderer.CORAL)


def test_rotated_ellipse_turns_with_angle():
    flat = new_buffer(40, 40)
    draw_ellipse(flat, 20, 20, 15, 3, (255, 255, 255))
    assert flat[20, 33].tolist() == [255, 255, 255]
    assert flat[33, 20].tolist() == [0, 0, 0]

    upright = new_buffer(40, 40)
    draw_ellipse(upright, 20, 20, 15, 3, (255, 255, 255), angle=math.pi / 2)
    assert upright[33, 20].tolist() == [255, 255, 255]
    assert upright[20, 33].tolist() == [0, 0, 0]


def test_celebration_frame_draws_followers(settings, make_session):
    session = make_session(custom=Settings(_env_file=None, timing={"milestone_interval": 1}))
    run_until(session, lambda: session.phase == GamePhase.CELEBRATING, steer=True)
    for _ in range(30):
        session.tick(1000.0 / 60)

    renderer = SceneRenderer(settings)
    frame = renderer.new_frame()
    renderer.render(session, frame)
    assert (frame == SceneRenderer.FOLLOWER).all(axis=2).any()

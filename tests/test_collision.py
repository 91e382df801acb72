"""Tests for the body versus coral hitbox."""

import pytest

from sharkdash.game.collision import Hitbox, check, first_hit
from sharkdash.game.obstacles import Obstacle


def coral(x: float, top: float = 200.0) -> Obstacle:
    return Obstacle(x=x, top=top, gap_height=232.76, width=80, speed=1.9)


@pytest.fixture
def hitbox(settings):
    return Hitbox.from_settings(settings)


def test_body_box_insets(body, hitbox):
    body.x, body.y = 100.0, 200.0
    left, top, right, bottom = hitbox.body_box(body)
    assert (left, top, right, bottom) == (110.0, 205.0, 210.0, 255.0)


def test_narrow_sprite_shrinks_hitbox(body):
    body.x, body.y = 100.0, 200.0
    left, _, right, _ = Hitbox(aspect_ratio=1.0).body_box(body)
    assert left == 100.0 + 30.0 + 10.0
    assert right == 100.0 + 90.0 - 10.0


def test_inside_gap_is_safe(body, hitbox):
    body.x, body.y = 100.0, 250.0
    assert not check(body, coral(150.0), hitbox)


def test_top_breach_collides(body, hitbox):
    body.x, body.y = 100.0, 190.0
    assert check(body, coral(150.0), hitbox)


def test_bottom_breach_collides(body, hitbox):
    body.x, body.y = 100.0, 380.0
    assert check(body, coral(150.0), hitbox)


def test_no_horizontal_overlap_never_collides(body, hitbox):
    body.x = 100.0
    for y in (0.0, 250.0, body.floor_y):
        body.y = y
        assert not check(body, coral(300.0), hitbox)
        assert not check(body, coral(-200.0), hitbox)


def test_edge_inset_is_strict(body, hitbox):
    body.x, body.y = 100.0, 0.0
    # Body right edge is 210; coral left edge is x + 5
    assert not check(body, coral(205.0), hitbox)
    assert check(body, coral(204.0), hitbox)


def test_whole_gap_band_is_safe(body, hitbox):
    obstacle = coral(150.0, top=120.0)
    y = obstacle.top - hitbox.inset_y
    while y + body.height - hitbox.inset_y <= obstacle.bottom:
        body.x, body.y = 100.0, y
        assert not check(body, obstacle, hitbox)
        y += 1.0


def test_first_hit_returns_offender(body, hitbox):
    body.x, body.y = 100.0, 10.0
    far = coral(350.0)
    near = coral(150.0)
    assert first_hit(body, [far, near], hitbox) is near
    assert first_hit(body, [far], hitbox) is None

"""Gameplay: body physics, obstacles, collision and scoring.

The session that ties them together lives in ``sharkdash.game.session``.
"""

from sharkdash.game.physics import PlayerBody, BodyState
from sharkdash.game.obstacles import Obstacle, ObstacleStream
from sharkdash.game.collision import Hitbox, check, first_hit
from sharkdash.game.score import ScoreTracker

__all__ = [
    "PlayerBody",
    "BodyState",
    "Obstacle",
    "ObstacleStream",
    "Hitbox",
    "check",
    "first_hit",
    "ScoreTracker",
]

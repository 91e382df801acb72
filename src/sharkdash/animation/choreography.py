"""Celebration choreography.

During a celebration the player's shark leads a figure-eight while a ring
of follower sharks circles the centre. Leader and follower motion are
different curves, so they are separate classes sharing only the
``update()`` / ``heading`` surface the renderer needs.
"""

from typing import List, Optional
import logging
import math
import random

from sharkdash.animation.particles import Firework
from sharkdash.config.settings import Settings
from sharkdash.game.physics import PlayerBody

logger = logging.getLogger(__name__)


CELEBRATION_PHRASES = [
    "Woohoo! You're crushing it!",
    "Look at you go! Sweet moves!",
    "That's what I'm talking about!",
    "You're on fire!",
    "Now we're talking!",
    "Unstoppable! Keep it up!",
    "You're nailing it!",
    "That's the way to do it!",
    "Now that's what I call skills!",
    "You're making it look easy!",
]


class LeaderDancer:
    """Drives the player body along a figure-eight around the centre."""

    def __init__(
        self,
        body: PlayerBody,
        center_x: float,
        center_y: float,
        phase: float = 0.0,
        speed: float = 0.02,
        radius: float = 80.0,
        bob: float = 40.0,
    ):
        self.body = body
        self.center_x = center_x
        self.center_y = center_y
        self.phase = phase
        self.speed = speed
        self.radius = radius
        self.bob = bob

    @property
    def x(self) -> float:
        return self.body.x

    @property
    def y(self) -> float:
        return self.body.y

    @property
    def heading(self) -> float:
        dx = math.cos(self.phase) * self.radius
        dy = math.sin(self.phase * 2) * self.bob
        return math.atan2(dy, dx) + math.pi / 2

    def update(self) -> None:
        self.body.x = self.center_x + math.cos(self.phase) * self.radius
        self.body.y = self.center_y + math.sin(self.phase * 2) * self.bob
        self.phase += self.speed


class FollowerDancer:
    """A companion shark circling the centre at a fixed angular offset."""

    def __init__(
        self,
        center_x: float,
        center_y: float,
        base_offset: float,
        phase: float = 0.0,
        speed: float = 0.02,
        radius: float = 100.0,
    ):
        self.center_x = center_x
        self.center_y = center_y
        self.base_offset = base_offset
        self.phase = phase
        self.speed = speed
        self.radius = radius
        self.x = center_x
        self.y = center_y

    @property
    def angle(self) -> float:
        return self.base_offset + self.phase

    @property
    def heading(self) -> float:
        # The whole ring faces the same way, whatever its slot on the circle
        return self.phase + math.pi / 2

    def update(self) -> None:
        self.x = self.center_x + math.cos(self.angle) * self.radius
        self.y = self.center_y + math.sin(self.angle) * self.radius
        self.phase += self.speed


class CelebrationShow:
    """Everything that moves during a celebration besides the scenery."""

    def __init__(
        self,
        settings: Settings,
        body: PlayerBody,
        phase: float = 0.0,
        rng: Optional[random.Random] = None,
    ):
        self._rng = rng or random.Random()
        amb = settings.ambient
        width = settings.playfield.width
        height = settings.playfield.height
        center_x = width / 2 - body.width / 2
        center_y = height / 2

        self.leader = LeaderDancer(
            body,
            center_x,
            center_y,
            phase=phase,
            speed=amb.dance_speed,
            radius=amb.leader_radius,
            bob=amb.leader_bob,
        )
        self.followers: List[FollowerDancer] = [
            FollowerDancer(
                center_x,
                center_y,
                base_offset=(math.pi * 2 / amb.follower_count) * i,
                phase=phase,
                speed=amb.dance_speed,
                radius=amb.follower_radius,
            )
            for i in range(amb.follower_count)
        ]
        self.fireworks: List[Firework] = [
            Firework(
                width,
                height,
                amb.firework_colors,
                particle_count=amb.firework_particles,
                rng=self._rng,
            )
            for _ in range(amb.firework_count)
        ]
        self.phrase = self._rng.choice(CELEBRATION_PHRASES)
        logger.debug(f"Celebration show ready: {self.phrase!r}")

    @property
    def dancers(self) -> list:
        return [self.leader, *self.followers]

    def update(self) -> None:
        """Advance one frame of choreography and fireworks."""
        self.leader.update()
        for follower in self.followers:
            follower.update()
        for firework in self.fireworks:
            firework.update()

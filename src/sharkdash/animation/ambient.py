"""Ambient underwater scenery: rising bubbles and parallax seaweed."""

from dataclasses import dataclass, field
from typing import List, Optional
import random

from sharkdash.config.settings import Settings


@dataclass
class Bubble:
    x: float
    y: float
    size: float
    speed: float
    opacity: float


class BubbleField:
    """Bubbles rise at their own speed and respawn below the playfield."""

    def __init__(
        self,
        width: float,
        height: float,
        count: int = 15,
        rng: Optional[random.Random] = None,
    ):
        self.width = width
        self.height = height
        self._rng = rng or random.Random()
        self.bubbles: List[Bubble] = []
        for _ in range(count):
            bubble = self._spawn()
            # Stagger the first wave so they do not rise in a line
            bubble.y = height + self._rng.random() * 20
            self.bubbles.append(bubble)

    def _spawn(self) -> Bubble:
        return Bubble(
            x=self._rng.random() * self.width,
            y=self.height + 10,
            size=self._rng.random() * 8 + 4,
            speed=self._rng.random() * 1 + 0.5,
            opacity=self._rng.random() * 0.4 + 0.1,
        )

    def update(self) -> None:
        for i, bubble in enumerate(self.bubbles):
            bubble.y -= bubble.speed
            if bubble.y < -bubble.size:
                self.bubbles[i] = self._spawn()


@dataclass
class Seaweed:
    """Two scrolling seaweed layers; offsets wrap at one playfield width."""

    width: float
    height: float = 120.0
    front_speed: float = 2.2
    back_speed: float = 0.3
    front_offset: float = 0.0
    back_offset: float = 0.0
    back_scale: float = field(default=2.25, repr=False)

    @property
    def back_height(self) -> float:
        return self.height * self.back_scale

    def update(self) -> None:
        self.front_offset -= self.front_speed
        self.back_offset -= self.back_speed
        if self.front_offset <= -self.width:
            self.front_offset = 0.0
        if self.back_offset <= -self.width:
            self.back_offset = 0.0


class Scenery:
    """Bubbles plus seaweed, built from settings."""

    def __init__(self, settings: Settings, rng: Optional[random.Random] = None):
        amb = settings.ambient
        self.bubbles = BubbleField(
            settings.playfield.width,
            settings.playfield.height,
            count=amb.bubble_count,
            rng=rng,
        )
        self.seaweed = Seaweed(
            width=settings.playfield.width,
            height=amb.seaweed_height,
            front_speed=amb.seaweed_front_speed,
            back_speed=amb.seaweed_back_speed,
        )

"""Coral obstacle stream: spawning, scrolling and retirement."""

from dataclasses import dataclass
from typing import List, Optional
import logging
import random

from sharkdash.config.settings import Settings

logger = logging.getLogger(__name__)


@dataclass
class Obstacle:
    """A coral pair with a passable gap between ``top`` and ``bottom``."""

    x: float
    top: float
    gap_height: float
    width: float
    speed: float
    passed: bool = False

    @property
    def bottom(self) -> float:
        return self.top + self.gap_height

    @property
    def right(self) -> float:
        return self.x + self.width

    def update(self) -> None:
        self.x -= self.speed

    def offscreen(self) -> bool:
        """True once the right edge has left the playfield on the left."""
        return self.x < -self.width


class ObstacleStream:
    """Ordered live obstacles. Spawn order is left-to-right order.

    A spawn happens only on cadence frames, and only once the newest
    obstacle has scrolled left of ``width - min_spacing``.
    """

    def __init__(self, settings: Settings, rng: Optional[random.Random] = None):
        self.obstacles: List[Obstacle] = []
        self._rng = rng or random.Random(settings.seed)

        obs = settings.obstacles
        self.playfield_width = settings.playfield.width
        self.cadence = obs.spawn_cadence
        self.min_spacing = obs.min_spacing
        self.gap_height = obs.gap_height
        self.width = obs.width
        self.speed = obs.speed
        self.min_top = obs.margin_top
        self.max_top = settings.playfield.height - obs.gap_height - obs.margin_bottom

    def __len__(self) -> int:
        return len(self.obstacles)

    def __iter__(self):
        return iter(self.obstacles)

    def can_spawn(self, frame_count: int) -> bool:
        if frame_count % self.cadence != 0:
            return False
        if not self.obstacles:
            return True
        return self.obstacles[-1].x <= self.playfield_width - self.min_spacing

    def try_spawn(self, frame_count: int) -> Optional[Obstacle]:
        """Spawn a new obstacle at the right edge if the gates allow it."""
        if not self.can_spawn(frame_count):
            return None

        top = self._rng.uniform(self.min_top, self.max_top)
        obstacle = Obstacle(
            x=float(self.playfield_width),
            top=top,
            gap_height=self.gap_height,
            width=self.width,
            speed=self.speed,
        )
        self.obstacles.append(obstacle)
        logger.debug(f"Obstacle spawned at frame {frame_count}: top={top:.1f}")
        return obstacle

    def advance_all(self) -> None:
        """Scroll every obstacle left and drop the ones fully off-screen."""
        for obstacle in self.obstacles:
            obstacle.update()
        self.obstacles = [o for o in self.obstacles if not o.offscreen()]

    def replace(self, obstacles: List[Obstacle]) -> None:
        """Swap in a saved list. The obstacle objects are kept as-is."""
        self.obstacles = obstacles

    def clear(self) -> None:
        self.obstacles = []

"""Particle effects for celebrations."""

from typing import List, Optional, Sequence, Tuple
from dataclasses import dataclass
import random
import math


Color = Tuple[int, int, int]


@dataclass
class Particle:
    """A single spark with per-frame physics."""

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    ay: float = 0.05  # gravity
    life: float = 1.0
    decay: float = 0.01

    @property
    def is_dead(self) -> bool:
        return self.life <= 0

    def update(self) -> None:
        """Advance one frame."""
        self.x += self.vx
        self.y += self.vy
        self.vy += self.ay
        self.life -= self.decay


class Firework:
    """A rocket that rises to a random height, bursts, and relaunches.

    While rising it is a single point; once it reaches ``target_y`` it turns
    into a ring of particles. When the last particle dies it starts over
    from the bottom of the playfield.
    """

    def __init__(
        self,
        width: float,
        height: float,
        colors: Sequence[Color],
        particle_count: int = 50,
        rng: Optional[random.Random] = None,
    ):
        self.width = width
        self.height = height
        self.colors = list(colors)
        self.particle_count = particle_count
        self._rng = rng or random.Random()
        self.particles: List[Particle] = []
        self.reset()

    def reset(self) -> None:
        """Launch a new rocket from the bottom edge."""
        self.x = self._rng.random() * self.width
        self.y = float(self.height)
        self.target_y = self._rng.random() * (self.height * 0.6)
        self.speed = 4 + self._rng.random() * 2
        self.particles = []
        self.exploded = False
        self.color = self._rng.choice(self.colors)

    def explode(self) -> None:
        self.exploded = True
        for i in range(self.particle_count):
            angle = (math.pi * 2 / self.particle_count) * i
            speed = 1 + self._rng.random()
            self.particles.append(Particle(
                x=self.x,
                y=self.y,
                vx=math.cos(angle) * speed,
                vy=math.sin(angle) * speed,
            ))

    def update(self) -> None:
        """Advance one frame."""
        if not self.exploded:
            self.y -= self.speed
            if self.y <= self.target_y:
                self.explode()
            return

        for p in self.particles:
            p.update()
        self.particles = [p for p in self.particles if not p.is_dead]
        if not self.particles:
            self.reset()

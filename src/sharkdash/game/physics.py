"""Player body kinematics."""

from dataclasses import dataclass
from typing import Tuple
import math

from sharkdash.config.settings import Settings


@dataclass
class BodyState:
    """Position and velocity saved across a celebration."""

    x: float
    y: float
    velocity: float = 0.0


@dataclass
class PlayerBody:
    """The shark: fixed x, falls under gravity, lifted by flaps.

    All quantities are per frame. ``y`` is the top edge of the body and is
    kept within ``[0, floor_y]``; the velocity is zeroed whenever a bound
    is hit.
    """

    x: float
    y: float
    width: float
    height: float
    floor_y: float
    gravity: float
    lift: float
    max_velocity: float
    smoothing: float
    velocity: float = 0.0

    def __post_init__(self) -> None:
        self._spawn = (self.x, self.y)

    @classmethod
    def from_settings(cls, settings: Settings) -> "PlayerBody":
        phys = settings.physics
        return cls(
            x=settings.playfield.width / 3,
            y=settings.playfield.height / 2,
            width=phys.body_width,
            height=phys.body_height,
            floor_y=settings.floor_y,
            gravity=phys.gravity,
            lift=phys.lift,
            max_velocity=phys.max_velocity,
            smoothing=phys.smoothing,
        )

    def integrate(self) -> None:
        """Apply one frame of gravity, clamp velocity, move and clamp position."""
        self.velocity += self.gravity
        self.velocity = max(min(self.velocity, self.max_velocity), -self.max_velocity)
        self.y += self.velocity * self.smoothing

        if self.y > self.floor_y:
            self.y = self.floor_y
            self.velocity = 0.0
        if self.y < 0:
            self.y = 0.0
            self.velocity = 0.0

    def reset(self) -> None:
        """Back to the spawn position, at rest."""
        self.x, self.y = self._spawn
        self.velocity = 0.0

    def flap(self) -> None:
        """Add the lift impulse. Rapid flaps compound up to the clamp."""
        self.velocity = max(self.velocity + self.lift, -self.max_velocity)

    def bounds(self) -> Tuple[float, float, float, float]:
        """Nominal box as (left, top, right, bottom)."""
        return self.x, self.y, self.x + self.width, self.y + self.height

    @property
    def rotation(self) -> float:
        """Nose tilt in radians for rendering."""
        return math.atan(self.velocity / 15)

    def snapshot(self) -> BodyState:
        # Velocity is stored neutral so the body does not drop on resume
        return BodyState(x=self.x, y=self.y, velocity=0.0)

    def restore(self, state: BodyState) -> None:
        self.x = state.x
        self.y = state.y
        self.velocity = state.velocity

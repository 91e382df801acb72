"""
Game settings using Pydantic.

Every tunable constant of the game lives here. Defaults reproduce the
classic shark tuning; any field can be overridden from the environment
(``SHARKDASH_PHYSICS__GRAVITY=0.3``) or a ``.env`` file.
"""

from functools import lru_cache
from typing import Tuple

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PlayfieldSettings(BaseModel):
    """Playfield dimensions in pixels."""

    width: int = Field(default=400, gt=0)
    height: int = Field(default=600, gt=0)


class PhysicsSettings(BaseModel):
    """Player body kinematics and hitbox."""

    body_width: float = Field(default=120.0, gt=0)
    body_height: float = Field(default=60.0, gt=0)

    # Per-frame units
    gravity: float = 0.2125
    lift: float = Field(default=-7.5, lt=0)
    max_velocity: float = Field(default=5.0, gt=0)
    smoothing: float = Field(default=0.9, gt=0, le=1.0)

    # Upward nudge given when a countdown starts
    countdown_velocity: float = -2.0

    # Sprite width / height, used to narrow the hitbox
    aspect_ratio: float = Field(default=2.0, gt=0)
    hitbox_inset_x: float = Field(default=10.0, ge=0)
    hitbox_inset_y: float = Field(default=5.0, ge=0)


class ObstacleSettings(BaseModel):
    """Coral obstacle shape and spawn cadence."""

    gap_height: float = Field(default=232.76, gt=0)
    width: float = Field(default=80.0, gt=0)
    speed: float = Field(default=1.9, gt=0)
    margin_top: float = Field(default=50.0, ge=0)
    margin_bottom: float = Field(default=50.0, ge=0)

    spawn_cadence: int = Field(default=100, gt=0)  # frames
    min_spacing: float = Field(default=231.0, ge=0)
    edge_inset: float = Field(default=5.0, ge=0)


class TimingSettings(BaseModel):
    """Real-time phases and scoring milestones."""

    fps: int = Field(default=60, gt=0)
    countdown_steps: int = Field(default=3, ge=0)
    countdown_step_ms: float = Field(default=1000.0, gt=0)
    celebration_duration_ms: float = Field(default=10000.0, gt=0)
    milestone_interval: int = Field(default=25, gt=0)


class AmbientSettings(BaseModel):
    """Decorative scenery and celebration choreography."""

    bubble_count: int = Field(default=15, ge=0)
    firework_count: int = Field(default=5, ge=0)
    firework_particles: int = Field(default=50, gt=0)
    follower_count: int = Field(default=4, ge=0)

    seaweed_front_speed: float = 2.2
    seaweed_back_speed: float = 0.3
    seaweed_height: float = 120.0

    dance_speed: float = 0.02
    leader_radius: float = 80.0
    leader_bob: float = 40.0
    follower_radius: float = 100.0

    firework_colors: Tuple[Tuple[int, int, int], ...] = (
        (255, 255, 0),
        (255, 0, 255),
        (0, 255, 255),
        (0, 255, 0),
        (255, 0, 0),
        (0, 0, 255),
    )


class DisplaySettings(BaseModel):
    """Simulator window settings."""

    scale: int = Field(default=1, ge=1)
    title: str = "Shark Dash"
    fullscreen: bool = False


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SHARKDASH_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False
    seed: int | None = None

    playfield: PlayfieldSettings = Field(default_factory=PlayfieldSettings)
    physics: PhysicsSettings = Field(default_factory=PhysicsSettings)
    obstacles: ObstacleSettings = Field(default_factory=ObstacleSettings)
    timing: TimingSettings = Field(default_factory=TimingSettings)
    ambient: AmbientSettings = Field(default_factory=AmbientSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)

    @model_validator(mode="after")
    def _check_fits(self) -> "Settings":
        # The gap plus both margins must fit or top cannot be drawn
        obs = self.obstacles
        if obs.margin_top + obs.gap_height + obs.margin_bottom > self.playfield.height:
            raise ValueError(
                f"obstacle gap {obs.gap_height} with margins "
                f"{obs.margin_top}/{obs.margin_bottom} does not fit a "
                f"{self.playfield.height}px playfield"
            )
        if self.physics.body_height > self.playfield.height:
            raise ValueError("body is taller than the playfield")
        return self

    @property
    def floor_y(self) -> float:
        """Lowest legal top edge for the player body."""
        return self.playfield.height - self.physics.body_height


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

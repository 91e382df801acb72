"""Body versus obstacle collision test.

The hitbox is smaller than the nominal body box: the sprite is drawn
``height * aspect_ratio`` wide and centred in the body box, then inset on
every side. Obstacle edges are inset too, which keeps near misses fair.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from sharkdash.config.settings import Settings
from sharkdash.game.obstacles import Obstacle
from sharkdash.game.physics import PlayerBody


@dataclass(frozen=True)
class Hitbox:
    aspect_ratio: float = 2.0
    inset_x: float = 10.0
    inset_y: float = 5.0
    edge_inset: float = 5.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "Hitbox":
        return cls(
            aspect_ratio=settings.physics.aspect_ratio,
            inset_x=settings.physics.hitbox_inset_x,
            inset_y=settings.physics.hitbox_inset_y,
            edge_inset=settings.obstacles.edge_inset,
        )

    def body_box(self, body: PlayerBody) -> Tuple[float, float, float, float]:
        """Effective (left, top, right, bottom) of the body."""
        draw_width = body.height * self.aspect_ratio
        left = body.x + (body.width - draw_width) / 2 + self.inset_x
        right = body.x + (body.width + draw_width) / 2 - self.inset_x
        top = body.y + self.inset_y
        bottom = body.y + body.height - self.inset_y
        return left, top, right, bottom


def check(body: PlayerBody, obstacle: Obstacle, hitbox: Hitbox = Hitbox()) -> bool:
    """True if the body touches the coral above or below the gap."""
    left, top, right, bottom = hitbox.body_box(body)

    # Horizontal gate first; vertical bounds only matter in the body's column
    if right > obstacle.x + hitbox.edge_inset and left < obstacle.right - hitbox.edge_inset:
        if top < obstacle.top or bottom > obstacle.bottom:
            return True
    return False


def first_hit(
    body: PlayerBody,
    obstacles: Iterable[Obstacle],
    hitbox: Hitbox = Hitbox(),
) -> Optional[Obstacle]:
    for obstacle in obstacles:
        if check(body, obstacle, hitbox):
            return obstacle
    return None

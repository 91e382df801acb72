"""Scene renderer: draws a GameSession into an RGB frame buffer.

Text (score, countdown, celebration phrase) is left to the window, which
has real fonts; everything else is flat shapes on the numpy buffer.
"""

import math

from sharkdash.config.settings import Settings
from sharkdash.core.state import GamePhase
from sharkdash.game.physics import PlayerBody
from sharkdash.game.session import GameSession
from sharkdash.graphics.primitives import (
    Buffer, Color, new_buffer, fill, draw_rect, draw_ellipse, draw_circle
)


class SceneRenderer:
    """Draws the playfield back to front."""

    WATER: Color = (16, 72, 120)
    BUBBLE: Color = (255, 255, 255)
    CORAL: Color = (240, 110, 90)
    CORAL_EDGE: Color = (190, 70, 60)
    SEAWEED: Color = (40, 150, 80)
    SHARK: Color = (140, 160, 180)
    SHARK_BELLY: Color = (225, 230, 235)
    FOLLOWER: Color = (110, 130, 160)
    DIM: Color = (0, 0, 0)

    BLADE_SPACING = 24
    BLADE_WIDTH = 8

    def __init__(self, settings: Settings):
        self.settings = settings
        self.width = settings.playfield.width
        self.height = settings.playfield.height
        self.aspect_ratio = settings.physics.aspect_ratio

    def new_frame(self) -> Buffer:
        return new_buffer(self.width, self.height, self.WATER)

    def render(self, session: GameSession, buffer: Buffer) -> None:
        fill(buffer, self.WATER)

        for bubble in session.scenery.bubbles.bubbles:
            draw_circle(buffer, bubble.x, bubble.y, bubble.size, self.BUBBLE, bubble.opacity)

        seaweed = session.scenery.seaweed
        self._draw_seaweed(buffer, seaweed.back_offset, seaweed.back_height, 0.6)

        body = session.body
        celebration = session.celebration
        if session.phase == GamePhase.CELEBRATING and celebration is not None:
            for firework in celebration.fireworks:
                if not firework.exploded:
                    draw_circle(buffer, firework.x, firework.y, 2, firework.color)
                for p in firework.particles:
                    draw_circle(buffer, p.x, p.y, 2, firework.color, max(0.0, p.life))
            for follower in celebration.followers:
                self._draw_shark(buffer, body, follower.x, follower.y, follower.heading, self.FOLLOWER)
            heading = celebration.leader.heading
        else:
            for obstacle in session.obstacles:
                self._draw_coral(buffer, obstacle.x, obstacle.top, obstacle.bottom, obstacle.width)
            heading = body.rotation

        self._draw_shark(buffer, body, body.x, body.y, heading, self.SHARK)

        self._draw_seaweed(buffer, seaweed.front_offset, seaweed.height, 0.9)

        if session.phase == GamePhase.COUNTDOWN:
            draw_rect(buffer, 0, 0, self.width, self.height, self.DIM, 0.5)

    def _draw_coral(self, buffer: Buffer, x: float, top: float, bottom: float, width: float) -> None:
        draw_rect(buffer, x, 0, width, top, self.CORAL)
        draw_rect(buffer, x, top - 6, width, 6, self.CORAL_EDGE)
        draw_rect(buffer, x, bottom, width, self.height - bottom, self.CORAL)
        draw_rect(buffer, x, bottom, width, 6, self.CORAL_EDGE)

    def _draw_shark(
        self,
        buffer: Buffer,
        body: PlayerBody,
        x: float,
        y: float,
        angle: float,
        color: Color,
    ) -> None:
        draw_width = body.height * self.aspect_ratio
        cx = x + body.width / 2
        cy = y + body.height / 2
        rx = draw_width / 2
        ry = body.height / 2
        cos_a, sin_a = math.cos(angle), math.sin(angle)

        def part(dx: float, dy: float, px: float, py: float, part_color: Color) -> None:
            # Offsets are in the shark's own frame, nose towards +x
            draw_ellipse(
                buffer,
                cx + dx * cos_a - dy * sin_a,
                cy + dx * sin_a + dy * cos_a,
                px,
                py,
                part_color,
                angle=angle,
            )

        part(0, 0, rx * 0.85, ry * 0.6, color)
        part(rx * 0.1, ry * 0.2, rx * 0.6, ry * 0.3, self.SHARK_BELLY)
        # Dorsal fin and tail
        part(0, -ry * 0.7, rx * 0.12, ry * 0.3, color)
        part(-rx * 0.9, 0, rx * 0.12, ry * 0.5, color)

    def _draw_seaweed(
        self,
        buffer: Buffer,
        offset: float,
        height: float,
        alpha: float,
    ) -> None:
        top = self.height - height
        # Two tiles side by side cover the wrap seam
        for tile in (offset, offset + self.width):
            x = tile
            while x < tile + self.width:
                draw_rect(buffer, x, top, self.BLADE_WIDTH, height, self.SEAWEED, alpha)
                x += self.BLADE_SPACING

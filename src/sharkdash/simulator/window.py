"""
Desktop window for Shark Dash using pygame.

Keyboard / mouse mapping:
    SPACE, UP, left click: Flap
    ENTER, R: Restart after game over
    ESC, Q: Quit
"""

import asyncio
import logging
from dataclasses import dataclass

import pygame

from sharkdash.config.settings import Settings, get_settings
from sharkdash.core.events import Event, EventBus, EventType, flap_event, restart_event, tick_event
from sharkdash.core.state import GamePhase
from sharkdash.game.session import GameSession
from sharkdash.graphics.renderer import SceneRenderer

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Simulator window configuration."""
    title: str = "Shark Dash"
    fullscreen: bool = False
    fps: int = 60
    scale: int = 1

    # Colors
    text_color: tuple[int, int, int] = (255, 255, 255)
    shadow_color: tuple[int, int, int] = (0, 0, 0)
    game_over_color: tuple[int, int, int] = (255, 90, 90)

    @classmethod
    def from_settings(cls, settings: Settings) -> "WindowConfig":
        return cls(
            title=settings.display.title,
            fullscreen=settings.display.fullscreen,
            fps=settings.timing.fps,
            scale=settings.display.scale,
        )


class SimulatorWindow:
    """Runs a GameSession in a pygame window, one tick per frame."""

    def __init__(
        self,
        config: WindowConfig | None = None,
        settings: Settings | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.config = config or WindowConfig.from_settings(self.settings)
        self.event_bus = event_bus or EventBus()

        self.session = GameSession(settings=self.settings, event_bus=self.event_bus)
        self.renderer = SceneRenderer(self.settings)
        self._buffer = self.renderer.new_frame()

        # Pygame setup
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._running = False
        self._frame_count = 0

        self._font: pygame.font.Font | None = None
        self._big_font: pygame.font.Font | None = None

        self.event_bus.subscribe(EventType.QUIT, lambda _e: self.stop())
        self.event_bus.subscribe(EventType.GAME_OVER, self._on_game_over)

        logger.info("SimulatorWindow created")

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        flags = pygame.DOUBLEBUF
        if self.config.fullscreen:
            flags |= pygame.FULLSCREEN

        size = (
            self.settings.playfield.width * self.config.scale,
            self.settings.playfield.height * self.config.scale,
        )
        self._screen = pygame.display.set_mode(size, flags)
        self._clock = pygame.time.Clock()

        pygame.font.init()
        self._font = pygame.font.SysFont("Arial", 24, bold=True)
        self._big_font = pygame.font.SysFont("Arial", 72, bold=True)

        logger.info(f"Pygame initialized: {size[0]}x{size[1]}")

    def _handle_events(self) -> None:
        """Translate pygame input into bus events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.event_bus.queue_event(Event(EventType.QUIT, source="window"))

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.event_bus.queue_event(flap_event(source="mouse"))

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        key = event.key
        if key in (pygame.K_ESCAPE, pygame.K_q):
            self.event_bus.queue_event(Event(EventType.QUIT, source="keyboard"))
        elif key in (pygame.K_SPACE, pygame.K_UP):
            self.event_bus.queue_event(flap_event(source="keyboard"))
        elif key in (pygame.K_RETURN, pygame.K_r):
            self.event_bus.queue_event(restart_event(source="keyboard"))

    def _on_game_over(self, event: Event) -> None:
        logger.info(f"Final score: {event.data.get('score', 0)}")

    async def run(self) -> None:
        """Main loop."""
        self._init_pygame()
        self._running = True
        self.session.start()

        logger.info("Simulator started")

        while self._running:
            self._handle_events()

            # Input first so a flap lands in this frame's tick
            await self.event_bus.process_queue()

            if self._clock:
                delta_ms = float(self._clock.get_time())
                self.event_bus.emit(tick_event(delta_ms, self._frame_count))

            self._render()

            if self._clock:
                self._clock.tick(self.config.fps)

            self._frame_count += 1

            # Yield to other tasks
            await asyncio.sleep(0)

        self._cleanup()

    def _render(self) -> None:
        if not self._screen:
            return

        self.renderer.render(self.session, self._buffer)
        surface = pygame.surfarray.make_surface(self._buffer.swapaxes(0, 1))
        if self.config.scale != 1:
            surface = pygame.transform.scale(surface, self._screen.get_size())
        self._screen.blit(surface, (0, 0))

        self._render_overlay()
        pygame.display.flip()

    def _render_overlay(self) -> None:
        session = self.session
        w, h = self._screen.get_size()

        self._blit_text(self._font, f"Score: {session.score}", (10, 10))

        if session.phase == GamePhase.COUNTDOWN:
            self._blit_centered(self._big_font, session.countdown_label, h // 2)
        elif session.phase == GamePhase.CELEBRATING and session.celebration:
            self._blit_centered(self._font, session.celebration.phrase, h // 3)
        elif session.phase == GamePhase.GAME_OVER:
            self._blit_centered(self._big_font, "GAME OVER", h // 2 - 40, self.config.game_over_color)
            self._blit_centered(self._font, f"Final score: {session.score}", h // 2 + 20)
            self._blit_centered(self._font, "Press ENTER to restart", h // 2 + 56)

    def _blit_text(self, font, text: str, pos: tuple[int, int], color=None) -> None:
        color = color or self.config.text_color
        shadow = font.render(text, True, self.config.shadow_color)
        self._screen.blit(shadow, (pos[0] + 2, pos[1] + 2))
        self._screen.blit(font.render(text, True, color), pos)

    def _blit_centered(self, font, text: str, y: int, color=None) -> None:
        width, _ = font.size(text)
        x = (self._screen.get_width() - width) // 2
        self._blit_text(font, text, (x, y), color)

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
        logger.info("Simulator stopped")

    def stop(self) -> None:
        """Stop the simulator."""
        self._running = False

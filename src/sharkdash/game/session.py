"""Game session: one shark, one obstacle stream, one score.

The session owns every mutable entity and the loops that drive them. Each
loop is a chain of continuations on the FrameScheduler:

- COUNTDOWN: a timer per step (3, 2, 1, GO), then PLAYING;
- PLAYING: a frame callback that re-arms itself every frame;
- CELEBRATING: a self re-arming frame callback plus one timer that ends it;
- GAME_OVER: nothing armed until ``on_restart``.

Every continuation is wrapped with the state machine's epoch at arming
time, so a callback that survives a transition does nothing when it fires.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional
import logging
import random

from sharkdash.animation.ambient import Scenery
from sharkdash.animation.choreography import CelebrationShow
from sharkdash.config.settings import Settings, get_settings
from sharkdash.core.events import Event, EventBus, EventType
from sharkdash.core.scheduler import FrameScheduler
from sharkdash.core.state import GamePhase, GameStateMachine
from sharkdash.game.collision import Hitbox, first_hit
from sharkdash.game.obstacles import Obstacle, ObstacleStream
from sharkdash.game.physics import BodyState, PlayerBody
from sharkdash.game.score import ScoreTracker

logger = logging.getLogger(__name__)


ScoreSink = Callable[[int, bool], None]


@dataclass
class CelebrationSnapshot:
    """Gameplay state saved when a celebration starts."""

    score: int
    obstacles: List[Obstacle]
    body: BodyState


class GameSession:
    """A single game, from countdown to game over and back."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        event_bus: Optional[EventBus] = None,
        scheduler: Optional[FrameScheduler] = None,
        rng: Optional[random.Random] = None,
        score_sink: Optional[ScoreSink] = None,
    ):
        self.settings = settings or get_settings()
        self.event_bus = event_bus or EventBus()
        self.scheduler = scheduler or FrameScheduler()
        self.state = GameStateMachine()
        self.hitbox = Hitbox.from_settings(self.settings)

        # Gap placement has its own generator so decoration never shifts it
        self._obstacle_rng = rng or random.Random(self.settings.seed)
        self._decor_rng = random.Random(self.settings.seed)

        self._score_sinks: List[ScoreSink] = []
        if score_sink is not None:
            self._score_sinks.append(score_sink)

        self._loop_handle: Optional[int] = None
        self._timer_handle: Optional[int] = None
        self._started = False

        self.countdown_value = self.settings.timing.countdown_steps
        self.celebration: Optional[CelebrationShow] = None
        self._snapshot: Optional[CelebrationSnapshot] = None
        self._dance_phase = 0.0

        self.body = PlayerBody.from_settings(self.settings)
        self.stream = ObstacleStream(self.settings, rng=self._obstacle_rng)
        self.tracker = ScoreTracker(self.settings.timing.milestone_interval)
        self._reset_entities()

        self.event_bus.subscribe(EventType.FLAP, lambda _e: self.on_flap())
        self.event_bus.subscribe(EventType.RESTART, lambda _e: self.on_restart())
        self.event_bus.subscribe(EventType.TICK, self._on_tick_event)
        self.state.add_listener(self._on_phase_changed)

    # Read-only views

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    @property
    def score(self) -> int:
        return self.tracker.score

    @property
    def obstacles(self) -> List[Obstacle]:
        return self.stream.obstacles

    @property
    def countdown_label(self) -> str:
        return "GO!" if self.countdown_value == 0 else str(self.countdown_value)

    def add_score_sink(self, sink: ScoreSink) -> None:
        self._score_sinks.append(sink)

    # Entry points

    def start(self) -> None:
        """Begin the first countdown. Later games go through ``on_restart``."""
        if self._started:
            logger.warning("Session already started")
            return
        self._started = True
        self.state.invalidate()
        logger.info("Session started")
        self._publish_score()
        self._begin_countdown()

    def tick(self, delta_ms: float) -> None:
        """Advance one rendered frame."""
        self.scheduler.advance(delta_ms)

    def on_flap(self) -> bool:
        """Apply a flap. Ignored outside PLAYING."""
        if self.state.phase != GamePhase.PLAYING:
            logger.debug(f"Flap ignored during {self.state.phase.name}")
            return False
        self.body.flap()
        return True

    def on_restart(self) -> bool:
        """Start a fresh game. Only accepted after GAME_OVER."""
        if not self.state.is_over:
            logger.debug(f"Restart ignored during {self.state.phase.name}")
            return False

        self._cancel_pending()
        self._reset_entities()
        self.state.transition(GamePhase.COUNTDOWN)
        logger.info("Session restarted")
        self._publish_score()
        self._begin_countdown()
        return True

    # Countdown

    def _begin_countdown(self) -> None:
        self._cancel_pending()
        self.countdown_value = self.settings.timing.countdown_steps
        self.body.velocity = self.settings.physics.countdown_velocity
        self._countdown_step()

    def _countdown_step(self) -> None:
        self.body.integrate()
        self.scenery.bubbles.update()
        self.event_bus.emit(Event(
            EventType.COUNTDOWN_STEP,
            data={"value": self.countdown_value, "label": self.countdown_label},
            source="session",
        ))

        step_ms = self.settings.timing.countdown_step_ms
        if self.countdown_value > 0:
            self._timer_handle = self.scheduler.call_later(
                step_ms, self._guarded(self._next_countdown_value)
            )
        else:
            self._timer_handle = self.scheduler.call_later(
                step_ms, self._guarded(self._begin_playing)
            )

    def _next_countdown_value(self) -> None:
        self.countdown_value -= 1
        self._countdown_step()

    # Playing

    def _begin_playing(self) -> None:
        self._timer_handle = None
        if not self.state.transition(GamePhase.PLAYING):
            return
        self._loop_handle = self.scheduler.request_frame(self._guarded(self._playing_frame))

    def _playing_frame(self) -> None:
        self._loop_handle = None
        if not self.state.allows_gameplay:
            return

        self.frame_count += 1
        self.body.integrate()
        self.scenery.seaweed.update()

        self.stream.try_spawn(self.frame_count)
        self.stream.advance_all()

        if first_hit(self.body, self.stream.obstacles, self.hitbox) is not None:
            self._game_over()
            return

        score_before = self.tracker.score
        milestone = self.tracker.update(self.stream.obstacles, self.body.x)
        if self.tracker.score != score_before:
            self._publish_score()
        if milestone:
            self._start_celebration()
            return

        self.scenery.bubbles.update()
        self._loop_handle = self.scheduler.request_frame(self._guarded(self._playing_frame))

    def _game_over(self) -> None:
        self.state.transition(GamePhase.GAME_OVER)
        self._cancel_pending()
        logger.info(f"Game over: score={self.tracker.score} frames={self.frame_count}")
        self._publish_score()
        self.event_bus.emit(Event(
            EventType.GAME_OVER,
            data={"score": self.tracker.score},
            source="session",
        ))

    # Celebration

    def _start_celebration(self) -> None:
        self._snapshot = CelebrationSnapshot(
            score=self.tracker.score,
            obstacles=list(self.stream.obstacles),
            body=self.body.snapshot(),
        )
        self.state.transition(GamePhase.CELEBRATING)
        self._cancel_pending()

        self.celebration = CelebrationShow(
            self.settings,
            self.body,
            phase=self._dance_phase,
            rng=self._decor_rng,
        )
        self.event_bus.emit(Event(
            EventType.CELEBRATION_STARTED,
            data={"score": self.tracker.score, "phrase": self.celebration.phrase},
            source="session",
        ))

        self._celebration_frame()
        self._timer_handle = self.scheduler.call_later(
            self.settings.timing.celebration_duration_ms,
            self._guarded(self._end_celebration),
        )

    def _celebration_frame(self) -> None:
        self._loop_handle = None
        if self.celebration is None:
            return
        self.celebration.update()
        self.scenery.seaweed.update()
        self.scenery.bubbles.update()
        self._loop_handle = self.scheduler.request_frame(self._guarded(self._celebration_frame))

    def _end_celebration(self) -> None:
        self._timer_handle = None
        snapshot = self._snapshot
        if self.celebration is not None:
            self._dance_phase = self.celebration.leader.phase
        self.celebration = None
        self._snapshot = None

        self.state.transition(GamePhase.COUNTDOWN)
        self._cancel_pending()

        if snapshot is not None:
            self.tracker.score = snapshot.score
            self.stream.replace(snapshot.obstacles)
            self.body.restore(snapshot.body)

        self.event_bus.emit(Event(
            EventType.CELEBRATION_ENDED,
            data={"score": self.tracker.score},
            source="session",
        ))
        self._publish_score()
        self._begin_countdown()

    # Helpers

    def _reset_entities(self) -> None:
        self.body.reset()
        self.stream.clear()
        self.tracker.reset()
        self.scenery = Scenery(self.settings, rng=self._decor_rng)
        self.frame_count = 0
        self.celebration = None
        self._snapshot = None

    def _guarded(self, fn: Callable[[], None]) -> Callable[[], None]:
        """Bind ``fn`` to the current epoch; it becomes a no-op after any transition."""
        epoch = self.state.epoch

        def continuation() -> None:
            if not self.state.is_current(epoch):
                logger.debug(f"Dropped stale continuation {fn.__name__} (epoch {epoch})")
                return
            fn()

        return continuation

    def _cancel_pending(self) -> None:
        self.scheduler.cancel(self._loop_handle)
        self.scheduler.cancel(self._timer_handle)
        self._loop_handle = None
        self._timer_handle = None

    def _publish_score(self) -> None:
        game_over = self.state.is_over
        for sink in self._score_sinks:
            try:
                sink(self.tracker.score, game_over)
            except Exception as e:
                logger.error(f"Error in score sink: {e}")
        self.event_bus.emit(Event(
            EventType.SCORE_CHANGED,
            data={"score": self.tracker.score, "game_over": game_over},
            source="session",
        ))

    def _on_phase_changed(self, old: GamePhase, new: GamePhase) -> None:
        self.event_bus.emit(Event(
            EventType.PHASE_CHANGED,
            data={"old": old, "new": new},
            source="session",
        ))

    def _on_tick_event(self, event: Event) -> None:
        self.tick(event.data.get("delta_ms", 1000.0 / self.settings.timing.fps))

"""Score tracking and celebration milestones."""

from typing import Iterable
import logging

from sharkdash.game.obstacles import Obstacle

logger = logging.getLogger(__name__)


class ScoreTracker:
    """Counts obstacles as the body clears them.

    An obstacle scores once, when its right edge moves left of the body's
    x. Reaching a positive multiple of ``milestone_interval`` stops the scan
    for that tick and reports the milestone.
    """

    def __init__(self, milestone_interval: int = 25):
        self.milestone_interval = milestone_interval
        self.score = 0

    def reset(self) -> None:
        self.score = 0

    def is_milestone(self) -> bool:
        return self.score > 0 and self.score % self.milestone_interval == 0

    def update(self, obstacles: Iterable[Obstacle], body_x: float) -> bool:
        """Score newly passed obstacles. Returns True if a milestone was hit."""
        for obstacle in obstacles:
            if obstacle.passed or obstacle.right >= body_x:
                continue
            obstacle.passed = True
            self.score += 1
            logger.debug(f"Obstacle passed, score={self.score}")

            if self.is_milestone():
                logger.info(f"Milestone reached: {self.score}")
                return True
        return False

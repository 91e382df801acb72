"""Animation module for Shark Dash."""

from sharkdash.animation.particles import Particle, Firework
from sharkdash.animation.ambient import Bubble, BubbleField, Seaweed, Scenery
from sharkdash.animation.choreography import (
    CELEBRATION_PHRASES,
    CelebrationShow,
    FollowerDancer,
    LeaderDancer,
)

__all__ = [
    # Particles
    "Particle",
    "Firework",
    # Scenery
    "Bubble",
    "BubbleField",
    "Seaweed",
    "Scenery",
    # Celebration
    "CELEBRATION_PHRASES",
    "CelebrationShow",
    "FollowerDancer",
    "LeaderDancer",
]

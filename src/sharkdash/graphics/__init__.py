"""Frame buffer graphics for Shark Dash."""

from sharkdash.graphics.renderer import SceneRenderer

__all__ = ["SceneRenderer"]

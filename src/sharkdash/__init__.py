"""Shark Dash - a side-scrolling shark arcade game."""

__version__ = "0.1.0"

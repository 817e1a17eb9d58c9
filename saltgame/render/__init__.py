"""Rendering module."""

from saltgame.render.renderer import SceneRenderer

__all__ = ["SceneRenderer"]

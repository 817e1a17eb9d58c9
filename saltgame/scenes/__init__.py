"""Scenes."""

from saltgame.scenes.meeting import MeetingScene

__all__ = ["MeetingScene"]

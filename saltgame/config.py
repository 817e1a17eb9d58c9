"""
Gameplay settings for the meeting scene.

All gameplay constants live on one frozen SceneSettings instance
that travels on the GameState; subsystems never read module
globals.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SceneSettings(BaseModel):
    """
    Scene geometry and tuning.

    Attributes:
        scene_width: Scene width in pixels
        scene_height: Scene height in pixels
        player_size: Player sprite edge length
        player_speed: Pixels moved per tick per unit of movement intent
        player_start: Player position when the scene starts
        character_size: Character sprite edge length
        interaction_radius: A character is reachable when strictly closer than this
        joystick_max: Longest joystick vector
        joystick_scale: Joystick vector to movement intent factor
        tick_period: Fixed tick length in seconds
        min_scale: Smallest pinch display scale
        max_scale: Largest pinch display scale
    """

    model_config = ConfigDict(frozen=True, extra='forbid')

    scene_width: int = Field(800, gt=0)
    scene_height: int = Field(600, gt=0)
    player_size: int = Field(50, gt=0)
    player_speed: float = Field(3.0, gt=0)
    player_start: tuple[float, float] = (100.0, 300.0)
    character_size: int = Field(60, gt=0)
    interaction_radius: float = Field(80.0, gt=0)
    joystick_max: float = Field(50.0, gt=0)
    joystick_scale: float = Field(0.1, ge=0)
    tick_period: float = Field(0.016, gt=0)
    min_scale: float = Field(0.5, gt=0)
    max_scale: float = Field(2.0, gt=0)

    @model_validator(mode='after')
    def _check_geometry(self) -> SceneSettings:
        if self.player_size > min(self.scene_width, self.scene_height):
            raise ValueError("player_size must fit inside the scene")
        if self.min_scale > self.max_scale:
            raise ValueError("min_scale must not exceed max_scale")
        return self

    @property
    def max_x(self) -> float:
        """Largest X the player's top-left corner may reach."""
        return float(self.scene_width - self.player_size)

    @property
    def max_y(self) -> float:
        return float(self.scene_height - self.player_size)

    def clamp(self, x: float, y: float) -> tuple[float, float]:
        """Clamp a player position into the scene bounds."""
        return (
            max(0.0, min(self.max_x, x)),
            max(0.0, min(self.max_y, y)),
        )

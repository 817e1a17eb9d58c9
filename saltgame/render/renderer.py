"""
Scene renderer - draws a SceneView with pygame.

Read-only: it receives an immutable SceneView and never sees the
GameState itself.
"""

from __future__ import annotations

import pygame

from saltgame.config import SceneSettings
from saltgame.state import SceneView

# Colors
BACKGROUND = (135, 206, 235)
GROUND = (152, 216, 200)
PLAYER_FILL = (245, 245, 245)
PLAYER_OUTLINE = (90, 90, 110)
CHARACTER_FILL = (255, 255, 255)
CHARACTER_BORDER = (192, 132, 252)
TEXT_DARK = (31, 41, 55)
TEXT_LIGHT = (255, 255, 255)
PANEL = (255, 255, 255, 230)
DIALOGUE_PANEL = (17, 24, 39, 235)
BUTTON = (147, 51, 234)
PAD = (255, 255, 255, 80)
KNOB = (168, 85, 247, 160)

PAD_RADIUS = 64
KNOB_RADIUS = 32
BUTTON_RADIUS = 40
MARGIN = 32
DIALOGUE_HEIGHT = 170

# Tried in order; the default font has no emoji
EMOJI_FONTS = ["notocoloremoji", "segoeuiemoji", "applecoloremoji", "twemoji", "symbola"]


class SceneRenderer:
    """
    Paints the scene, HUD, dialogue box and touch controls.

    The scene is drawn at its native size on an offscreen surface,
    then scaled by the pinch factor and centered on the window.
    Touch controls are drawn in window space, unscaled.
    """

    def __init__(self, settings: SceneSettings):
        self.settings = settings
        self._canvas = pygame.Surface((settings.scene_width, settings.scene_height))
        self._fonts: dict[tuple[int, bool], pygame.font.Font] = {}
        self._emoji_path: str | None = None
        self._emoji_checked = False

    # Layout (shared with the scene for hit testing)

    def scene_rect(self, screen_size: tuple[int, int], scale: float) -> pygame.Rect:
        """Where the scaled scene lands on the window."""
        w = int(self.settings.scene_width * scale)
        h = int(self.settings.scene_height * scale)
        rect = pygame.Rect(0, 0, w, h)
        rect.center = (screen_size[0] // 2, screen_size[1] // 2)
        return rect

    def to_scene(
        self,
        point: tuple[int, int],
        screen_size: tuple[int, int],
        scale: float,
    ) -> tuple[float, float]:
        """Map a window point to scene coordinates."""
        rect = self.scene_rect(screen_size, scale)
        return ((point[0] - rect.x) / scale, (point[1] - rect.y) / scale)

    def dialogue_rect(self) -> pygame.Rect:
        """Dialogue box, in scene coordinates."""
        return pygame.Rect(
            0,
            self.settings.scene_height - DIALOGUE_HEIGHT,
            self.settings.scene_width,
            DIALOGUE_HEIGHT,
        )

    def joystick_center(self, screen_size: tuple[int, int]) -> tuple[int, int]:
        return (MARGIN + PAD_RADIUS, screen_size[1] - MARGIN - PAD_RADIUS)

    def button_center(self, screen_size: tuple[int, int]) -> tuple[int, int]:
        return (screen_size[0] - MARGIN - BUTTON_RADIUS, screen_size[1] - MARGIN - BUTTON_RADIUS)

    def in_joystick_pad(self, point: tuple[int, int], screen_size: tuple[int, int]) -> bool:
        cx, cy = self.joystick_center(screen_size)
        return (point[0] - cx) ** 2 + (point[1] - cy) ** 2 <= PAD_RADIUS ** 2

    def in_interact_button(self, point: tuple[int, int], screen_size: tuple[int, int]) -> bool:
        cx, cy = self.button_center(screen_size)
        return (point[0] - cx) ** 2 + (point[1] - cy) ** 2 <= BUTTON_RADIUS ** 2

    # Drawing

    def draw(self, surface: pygame.Surface, view: SceneView) -> None:
        canvas = self._canvas
        canvas.fill(BACKGROUND)
        pygame.draw.rect(
            canvas, GROUND,
            (0, self.settings.scene_height // 2, self.settings.scene_width, self.settings.scene_height),
        )

        self._draw_characters(canvas, view)
        self._draw_player(canvas, view)
        self._draw_hud(canvas, view)
        if view.dialogue is not None:
            self._draw_dialogue(canvas, view)

        surface.fill((0, 0, 0))
        rect = self.scene_rect(surface.get_size(), view.scale)
        if view.scale == 1.0:
            surface.blit(canvas, rect)
        else:
            surface.blit(pygame.transform.smoothscale(canvas, rect.size), rect)

        if view.touch_controls:
            self._draw_touch_controls(surface, view)
        else:
            self._draw_hint(surface)

    def emoji_font_path(self) -> str | None:
        """Installed emoji-capable font, looked up once."""
        if not self._emoji_checked:
            if not pygame.font.get_init():
                pygame.font.init()
            self._emoji_path = pygame.font.match_font(EMOJI_FONTS)
            self._emoji_checked = True
        return self._emoji_path

    def sprite_label(self, glyph: str, name: str) -> str:
        """
        Text drawn on a character sprite: the glyph when an emoji
        font is installed, otherwise the first letter of the name.
        """
        if glyph and self.emoji_font_path() is not None:
            return glyph
        return name[:1]

    def _font(self, size: int, emoji: bool = False) -> pygame.font.Font:
        key = (size, emoji)
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            path = self.emoji_font_path() if emoji else None
            self._fonts[key] = pygame.font.Font(path, size)
        return self._fonts[key]

    def _text(self, surface, text, size, color, center=None, topleft=None, emoji=False) -> pygame.Rect:
        image = self._font(size, emoji).render(text, True, color)
        rect = image.get_rect()
        if center is not None:
            rect.center = center
        elif topleft is not None:
            rect.topleft = topleft
        surface.blit(image, rect)
        return rect

    def _draw_characters(self, canvas: pygame.Surface, view: SceneView) -> None:
        size = self.settings.character_size
        half = size // 2
        for character in view.characters:
            if not character.visible:
                continue
            center = (int(character.x) + half, int(character.y) + half)
            pygame.draw.circle(canvas, CHARACTER_FILL, center, half)
            pygame.draw.circle(canvas, CHARACTER_BORDER, center, half, 4)
            label = self.sprite_label(character.glyph, character.name)
            self._text(canvas, label, 36, TEXT_DARK, center=center, emoji=label == character.glyph)

            if view.nearby == character.character_id:
                self._text(canvas, character.name, 20, TEXT_DARK, center=(center[0], int(character.y) - 12))

    def _draw_player(self, canvas: pygame.Surface, view: SceneView) -> None:
        size = self.settings.player_size
        rect = pygame.Rect(int(view.player[0]), int(view.player[1]), size, size)
        pygame.draw.rect(canvas, PLAYER_FILL, rect, border_radius=12)
        pygame.draw.rect(canvas, PLAYER_OUTLINE, rect, 3, border_radius=12)
        for dx in (-8, 0, 8):
            pygame.draw.circle(canvas, PLAYER_OUTLINE, (rect.centerx + dx, rect.top + 10), 2)

    def _draw_hud(self, canvas: pygame.Surface, view: SceneView) -> None:
        panel = pygame.Surface((170, 40), pygame.SRCALPHA)
        pygame.draw.rect(panel, PANEL, panel.get_rect(), border_radius=20)
        canvas.blit(panel, (16, 16))
        self._text(canvas, f"Встреч: {view.met_count}/{view.total}", 26, TEXT_DARK, center=(101, 36))

    def _draw_dialogue(self, canvas: pygame.Surface, view: SceneView) -> None:
        dialogue = view.dialogue
        box = self.dialogue_rect()
        panel = pygame.Surface(box.size, pygame.SRCALPHA)
        panel.fill(DIALOGUE_PANEL)
        canvas.blit(panel, box)

        name_x = box.x + 32
        if self.sprite_label(dialogue.glyph, dialogue.name) == dialogue.glyph:
            glyph_rect = self._text(
                canvas, dialogue.glyph, 32, TEXT_LIGHT, topleft=(name_x, box.y + 24), emoji=True,
            )
            name_x = glyph_rect.right + 12
        self._text(canvas, dialogue.name, 32, TEXT_LIGHT, topleft=(name_x, box.y + 24))
        self._text(canvas, dialogue.text, 28, TEXT_LIGHT, topleft=(box.x + 32, box.y + 64))

        label = "Закрыть" if dialogue.is_last_line else "Далее"
        button = pygame.Rect(0, 0, 140, 44)
        button.bottomright = (box.right - 24, box.bottom - 20)
        pygame.draw.rect(canvas, BUTTON, button, border_radius=22)
        self._text(canvas, label, 26, TEXT_LIGHT, center=button.center)

    def _draw_touch_controls(self, surface: pygame.Surface, view: SceneView) -> None:
        size = surface.get_size()
        overlay = pygame.Surface(size, pygame.SRCALPHA)

        cx, cy = self.joystick_center(size)
        pygame.draw.circle(overlay, PAD, (cx, cy), PAD_RADIUS)
        knob = (int(cx + view.joystick[0]), int(cy + view.joystick[1]))
        pygame.draw.circle(overlay, KNOB, knob, KNOB_RADIUS)

        pygame.draw.circle(overlay, BUTTON + (200,), self.button_center(size), BUTTON_RADIUS)
        surface.blit(overlay, (0, 0))
        self._text(surface, "E", 36, TEXT_LIGHT, center=self.button_center(size))

    def _draw_hint(self, surface: pygame.Surface) -> None:
        width, height = surface.get_size()
        self._text(
            surface,
            "Управление: ← → ↑ ↓ / WASD | Пробел - взаимодействие",
            20, TEXT_DARK,
            center=(width // 2, height - 16),
        )

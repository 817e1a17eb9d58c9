"""
Run the game: python -m saltgame

Set SALT_DEBUG=1 for debug logging and the FPS caption.
"""

import logging
import os

from saltengine import Game, GameConfig
from saltgame.config import SceneSettings
from saltgame.scenes import MeetingScene


def main() -> None:
    debug = os.environ.get("SALT_DEBUG", "") not in ("", "0")
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = SceneSettings()
    game = Game(GameConfig(
        title="Silent Salt",
        width=settings.scene_width,
        height=settings.scene_height,
        fixed_timestep=settings.tick_period,
        debug=debug,
    ))
    game.scene_manager.push(MeetingScene(game, settings))
    game.run()


if __name__ == "__main__":
    main()

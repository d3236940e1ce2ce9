"""Application entry point."""

import logging
import random

from salvo.game.app.console import StdConsole
from salvo.game.app.controller import GameController
from salvo.game.infra.app_data import ensure_app_data_dirs
from salvo.game.infra.config import load_default_env_files
from salvo.game.infra.logging import setup_logging
from salvo.game.saves.repository import SaveRepository
from salvo.game.scores.repository import ScoreRepository
from salvo.game.scores.service import LeaderboardService

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the Salvo console game."""
    load_default_env_files()
    paths = ensure_app_data_dirs()
    setup_logging()
    logger.info(
        "app_data_paths root=%s logs=%s saves=%s scores=%s",
        paths["root"],
        paths["logs"],
        paths["saves"],
        paths["scores"],
    )
    controller = GameController(
        console=StdConsole(),
        saves=SaveRepository(paths["saves"]),
        leaderboard=LeaderboardService(ScoreRepository(paths["scores"])),
        rng=random.Random(),
    )
    try:
        controller.run()
    except KeyboardInterrupt:
        logger.info("interrupted")


if __name__ == "__main__":
    main()

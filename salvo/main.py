"""Application entry point."""

import logging
import random

from salvo.game.ai.random_strike import RandomStrikeAI
from salvo.game.app.console import run_console
from salvo.game.app.session import GameSession
from salvo.game.infra.app_data import ensure_app_data_dirs
from salvo.game.infra.config import load_default_env_files, load_settings
from salvo.game.infra.logging import setup_logging, shutdown_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Run a console match against the computer."""
    load_default_env_files()
    settings = load_settings()
    paths = ensure_app_data_dirs()
    setup_logging(settings)
    logger.info("app_data_paths root=%s logs=%s", paths["root"], paths["logs"])
    if settings.seed is not None:
        logger.info("Seeded run", extra={"salvo_seed": settings.seed})

    rng = random.Random(settings.seed)
    try:
        run_console(GameSession(), RandomStrikeAI(rng), rng, human_first=settings.human_first)
    finally:
        shutdown_logging()


if __name__ == "__main__":
    main()

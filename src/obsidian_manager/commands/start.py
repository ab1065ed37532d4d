"""Start Obsidian."""

from obsidian_manager.core.errors import AppControlError
from obsidian_manager.core.logger import Logger
from obsidian_manager.core.types import AppController


def start(logger: Logger, app: AppController) -> int:
    logger.info("Starting Obsidian...")
    try:
        app.start(logger)
    except AppControlError as e:
        logger.error(f"Failed to start Obsidian: {e}")
        return 1
    logger.info("✓ Obsidian started")
    return 0

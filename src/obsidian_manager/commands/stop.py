"""Stop Obsidian."""

from obsidian_manager.core.logger import Logger
from obsidian_manager.core.types import AppController


def stop(logger: Logger, app: AppController) -> int:
    logger.info("Stopping Obsidian...")
    app.stop(logger)
    logger.info("✓ Obsidian stopped")
    return 0

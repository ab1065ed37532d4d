"""Remove the sleep/wake LaunchAgent."""

from obsidian_manager.core.config import Config
from obsidian_manager.core.errors import LaunchctlError
from obsidian_manager.core.logger import Logger
from obsidian_manager.system import launchd


def uninstall(logger: Logger, config: Config) -> int:
    """Unload and delete the LaunchAgent plist. Returns the exit code."""
    logger.info("Uninstalling Obsidian Manager LaunchAgent...")

    plist_path = config.plist.path
    if not plist_path.exists():
        logger.warn(f"LaunchAgent not found: {plist_path}")
        logger.info("Nothing to uninstall.")
        return 0

    try:
        launchd.unload(plist_path)
        logger.debug("LaunchAgent unloaded")
    except LaunchctlError as e:
        logger.warn(f"Failed to unload LaunchAgent (it may not be running): {e}")

    try:
        plist_path.unlink()
        logger.info("✓ LaunchAgent removed successfully")
    except OSError as e:
        logger.error(f"Failed to remove plist file: {e}")
        return 1

    logger.info("Uninstallation complete!")
    return 0

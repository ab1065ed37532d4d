"""Report LaunchAgent status."""

from obsidian_manager.core.config import Config
from obsidian_manager.core.errors import LaunchctlError
from obsidian_manager.core.logger import Logger
from obsidian_manager.system import launchd


def status(logger: Logger, config: Config) -> int:
    """Show whether the plist is installed and the agent is running."""
    label = config.plist.label
    plist_path = config.plist.path

    logger.info("Checking Obsidian Manager LaunchAgent status...")
    logger.info("")

    plist_exists = plist_path.exists()
    logger.info(f"Plist file: {'✓ Installed' if plist_exists else '✗ Not installed'}")
    logger.info(f"  Path: {plist_path}")
    logger.info("")

    if not plist_exists:
        logger.info('Run "install" command to set up LaunchAgent')
        return 0

    try:
        details = launchd.find_job(label)
    except LaunchctlError as e:
        logger.debug(f"launchctl list failed: {e}")
        details = None

    if details:
        logger.info("LaunchAgent: ✓ Running")
        logger.info("")
        logger.info("Details:")
        logger.info(details)
    else:
        logger.info("LaunchAgent: ✗ Not running")
        logger.info("")
        logger.info("The LaunchAgent is installed but not currently running.")
        logger.info(f"Try reloading it with: launchctl load {plist_path}")
    return 0

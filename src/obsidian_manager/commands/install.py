"""Install the sleep/wake LaunchAgent."""

from obsidian_manager.core.config import Config
from obsidian_manager.core.errors import LaunchctlError
from obsidian_manager.core.logger import Logger
from obsidian_manager.system import launchd
from obsidian_manager.system.plist import generate_plist


def install(logger: Logger, config: Config) -> int:
    """
    Write the LaunchAgent plist and load it.

    Returns:
        Process exit code
    """
    logger.info("Installing Obsidian Manager LaunchAgent...")

    if not launchd.is_installed(config.sleepwatcher_path):
        logger.error("sleepwatcher is not installed. Please install it first:")
        logger.info("  brew install sleepwatcher")
        return 1

    cli_path = config.cli_path
    sleep_script = f"{cli_path} stop"
    wake_script = f"{cli_path} start"
    plist_content = generate_plist(config, sleep_script, wake_script)
    plist_path = config.plist.path

    launch_agents_dir = plist_path.parent
    if not launch_agents_dir.exists():
        launch_agents_dir.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Created directory: {launch_agents_dir}")

    if plist_path.exists():
        logger.warn("LaunchAgent already exists. Unloading first...")
        try:
            launchd.unload(plist_path)
        except LaunchctlError as e:
            logger.debug(f"Ignoring unload failure: {e}")

    try:
        plist_path.write_text(plist_content, encoding="utf-8")
        logger.debug(f"Created plist file: {plist_path}")
    except OSError as e:
        logger.error(f"Failed to write plist file: {e}")
        return 1

    try:
        launchd.load(plist_path)
        logger.info("✓ LaunchAgent loaded successfully")
    except LaunchctlError as e:
        logger.error(f"Failed to load LaunchAgent: {e}")
        return 1

    logger.info("Installation complete!")
    logger.info(f"- CLI binary: {cli_path}")
    logger.info(f"- Sleep script: {sleep_script}")
    logger.info(f"- Wake script: {wake_script}")
    logger.info(f"- Plist: {plist_path}")
    return 0

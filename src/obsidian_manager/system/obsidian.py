"""Start and stop the Obsidian desktop app."""

import subprocess
from pathlib import Path

from obsidian_manager.core.config import (
    DEFAULT_OBSIDIAN_APP_PATH,
    OBSIDIAN_PROCESS_NAME,
    Config,
)
from obsidian_manager.core.errors import AppControlError
from obsidian_manager.core.logger import Logger


class ObsidianApp:
    """AppController backed by macOS ``open`` and ``pkill``."""

    def __init__(
        self,
        app_path: Path | str = DEFAULT_OBSIDIAN_APP_PATH,
        process_name: str = OBSIDIAN_PROCESS_NAME,
    ):
        self.app_path = Path(app_path)
        self.process_name = process_name

    @classmethod
    def from_config(cls, config: Config) -> "ObsidianApp":
        return cls(config.obsidian.app_path, config.obsidian.process_name)

    def start(self, logger: Logger) -> None:
        """Open the app. Raises AppControlError if ``open`` fails."""
        command = ["open", str(self.app_path)]
        try:
            subprocess.run(command, check=True)
        except (OSError, subprocess.CalledProcessError) as e:
            raise AppControlError(f"Failed to open Obsidian: {e}") from e
        logger.debug(f"Executed: {' '.join(command)}")

    def stop(self, logger: Logger) -> None:
        """Kill the app process. A missing process is not an error."""
        command = ["pkill", "-x", self.process_name]
        try:
            result = subprocess.run(command)
        except OSError as e:
            logger.debug(f"pkill could not be run: {e}")
            return
        if result.returncode == 0:
            logger.debug(f"Executed: {' '.join(command)}")
        else:
            # pkill exits 1 when no process matched
            logger.debug(
                f"pkill command completed with exit code {result.returncode} "
                "(no process found)"
            )

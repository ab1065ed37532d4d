"""LaunchAgent property list rendering.

The agent runs ``sleepwatcher``, which calls our CLI with ``stop`` when the
machine goes to sleep and ``start`` when it wakes.
"""

import plistlib
from pathlib import Path

from obsidian_manager.core.config import Config

LAUNCH_AGENT_PATH = "/usr/local/bin:/usr/bin:/bin:/usr/sbin:/sbin:/opt/homebrew/bin"


def get_log_paths(label: str, home: Path | None = None) -> tuple[Path, Path]:
    """Return (stdout, stderr) log file paths for the agent."""
    logs_dir = (home or Path.home()) / "Library" / "Logs"
    return logs_dir / f"{label}.stdout.log", logs_dir / f"{label}.stderr.log"


def generate_plist(
    config: Config,
    sleep_script: str,
    wake_script: str,
    home: Path | None = None,
) -> str:
    """
    Render the LaunchAgent plist.

    Args:
        config: Runtime configuration (label, sleepwatcher path)
        sleep_script: Command sleepwatcher runs on sleep
        wake_script: Command sleepwatcher runs on wake
        home: Home directory for log paths (defaults to the current user's)

    Returns:
        XML plist document
    """
    stdout_log, stderr_log = get_log_paths(config.plist.label, home)
    document = {
        "Label": config.plist.label,
        "ProgramArguments": [
            config.sleepwatcher_path,
            "-V",
            "-s",
            sleep_script,
            "-w",
            wake_script,
        ],
        "EnvironmentVariables": {"PATH": LAUNCH_AGENT_PATH},
        "RunAtLoad": True,
        "KeepAlive": True,
        "StandardOutPath": str(stdout_log),
        "StandardErrorPath": str(stderr_log),
    }
    return plistlib.dumps(document, sort_keys=False).decode("utf-8")

"""Thin wrappers around launchctl and executable lookup."""

import logging
import shutil
import subprocess
from pathlib import Path

from obsidian_manager.core.errors import LaunchctlError

logger = logging.getLogger(__name__)


def is_installed(executable: str) -> bool:
    """Return True if the executable can be found (absolute path or on PATH)."""
    return shutil.which(executable) is not None


def _launchctl(*args: str) -> str:
    """Run launchctl with the given arguments and return its stdout."""
    command = ["launchctl", *args]
    logger.debug(f"Running: {' '.join(command)}")
    try:
        result = subprocess.run(command, capture_output=True, text=True)
    except OSError as e:
        raise LaunchctlError(f"launchctl {args[0]} failed: {e}") from e
    if result.returncode != 0:
        detail = (result.stderr or result.stdout or "").strip()
        raise LaunchctlError(
            f"launchctl {args[0]} exited with {result.returncode}: {detail}"
        )
    return result.stdout


def load(plist_path: Path) -> None:
    """Load a LaunchAgent plist."""
    _launchctl("load", str(plist_path))


def unload(plist_path: Path) -> None:
    """Unload a LaunchAgent plist."""
    _launchctl("unload", str(plist_path))


def find_job(label: str) -> str | None:
    """
    Look up a job in ``launchctl list``.

    Returns:
        The matching listing lines, or None when the job is not listed
    """
    output = _launchctl("list")
    matches = [line for line in output.splitlines() if label in line]
    if not matches:
        return None
    return "\n".join(matches)

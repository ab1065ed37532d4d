"""Configuration management for Obsidian Manager."""

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict
from rich.logging import RichHandler

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

PLIST_LABEL = "com.user.obsidian-manager"
DEFAULT_SLEEPWATCHER_PATH = "/usr/local/sbin/sleepwatcher"
DEFAULT_OBSIDIAN_APP_PATH = "/Applications/Obsidian.app"
OBSIDIAN_PROCESS_NAME = "Obsidian"
CLI_NAME = "obsidian-manager"


def get_env(key: str, default: str | None = None) -> str | None:
    """Get environment variable with optional default."""
    return os.getenv(key, default)


def get_env_bool(key: str, default: bool = False) -> bool:
    """Get environment variable as boolean."""
    value = os.getenv(key)
    if value is None:
        return default
    lowered = value.lower()
    if lowered in ("true", "1", "yes"):
        return True
    if lowered in ("false", "0", "no"):
        return False
    logger.warning(
        "Environment variable %s=%r is not a valid boolean, using %s",
        key,
        value,
        default,
    )
    return default


# Logging
LOG_LEVEL = get_env("LOG_LEVEL", "INFO") or "INFO"
DEBUG = get_env_bool("OBSIDIAN_MANAGER_DEBUG", False)


class PlistConfig(BaseModel):
    """Where the LaunchAgent descriptor lives and what it is called."""

    model_config = ConfigDict(frozen=True)

    label: str
    path: Path


class ObsidianConfig(BaseModel):
    """Obsidian app and vault locations."""

    model_config = ConfigDict(frozen=True)

    vault_path: Path
    app_path: Path = Path(DEFAULT_OBSIDIAN_APP_PATH)
    process_name: str = OBSIDIAN_PROCESS_NAME


class Config(BaseModel):
    """Resolved runtime configuration."""

    model_config = ConfigDict(frozen=True)

    project_root: Path
    plist: PlistConfig
    obsidian: ObsidianConfig
    sleepwatcher_path: str = DEFAULT_SLEEPWATCHER_PATH

    @property
    def cli_path(self) -> Path:
        """Path of the installed console script used by the LaunchAgent."""
        return self.project_root / "bin" / CLI_NAME


def create_config() -> Config:
    """Build the configuration from the environment and platform defaults."""
    plist_path = Path.home() / "Library" / "LaunchAgents" / f"{PLIST_LABEL}.plist"
    vault_path = get_env("OBSIDIAN_VAULT_PATH") or os.getcwd()

    return Config(
        project_root=Path(sys.prefix),
        plist=PlistConfig(label=PLIST_LABEL, path=plist_path),
        obsidian=ObsidianConfig(
            vault_path=Path(vault_path).expanduser(),
            app_path=Path(
                get_env("OBSIDIAN_APP_PATH", DEFAULT_OBSIDIAN_APP_PATH)
                or DEFAULT_OBSIDIAN_APP_PATH
            ),
        ),
        sleepwatcher_path=get_env("SLEEPWATCHER_PATH", DEFAULT_SLEEPWATCHER_PATH)
        or DEFAULT_SLEEPWATCHER_PATH,
    )


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure and return logger.

    INFO output is kept to bare messages; debug mode adds time and level.
    Rich rendering is used only when stdout is a terminal; otherwise each
    message is written as one plain line.
    """
    if debug:
        level = logging.DEBUG
    else:
        level = getattr(logging, LOG_LEVEL.upper(), logging.INFO)

    if sys.stdout.isatty():
        handler: logging.Handler = RichHandler(
            show_time=debug,
            show_level=debug,
            show_path=debug,
            markup=False,
            rich_tracebacks=debug,
            log_time_format="%H:%M:%S",
        )
        log_format = "%(message)s"
    else:
        handler = logging.StreamHandler(sys.stdout)
        if debug:
            log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            log_format = "%(message)s"

    logging.basicConfig(
        format=log_format,
        level=level,
        handlers=[handler],
        force=True,
    )
    return logging.getLogger(CLI_NAME)

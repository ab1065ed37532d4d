"""Create the next day's daily note with TODOs carried over."""

from datetime import date
from pathlib import Path

from obsidian_manager.core.config import Config
from obsidian_manager.core.errors import ObsidianManagerError, ValidationError
from obsidian_manager.core.logger import Logger
from obsidian_manager.core.types import NextDayAlreadyExists, NextDayCreated
from obsidian_manager.vault.daily import create_next_day_note
from obsidian_manager.vault.dates import format_date, parse_date

DATE_USAGE = "Usage: obsidian-manager next-day --date YYYY-MM-DD"
DATE_EXAMPLE = "Example: obsidian-manager next-day --date 2025-10-12"
PATH_USAGE = "Usage: obsidian-manager next-day --path /path/to/vault"
PATH_EXAMPLE = "Example: obsidian-manager next-day --path ~/Documents/Obsidian/Vault"
DATE_HINT = "Expected format: YYYY-MM-DD (e.g., 2025-10-12)"


class _OptionError(ValidationError):
    """ValidationError carrying the usage lines to show with it."""

    def __init__(self, message: str, *hints: str):
        super().__init__(message)
        self.hints = hints


def _resolve_options(
    config: Config,
    date_str: str | None,
    path: str | None,
    require_path: bool,
) -> tuple[date, Path]:
    if not date_str:
        raise _OptionError("Date option is required", DATE_USAGE, DATE_EXAMPLE)
    if not path and require_path:
        raise _OptionError(
            "Obsidian vault path option is required", PATH_USAGE, PATH_EXAMPLE
        )
    try:
        base_date = parse_date(date_str)
    except ValidationError as e:
        raise _OptionError(f"Invalid date format: {date_str}", DATE_HINT) from e
    vault_path = Path(path).expanduser() if path else config.obsidian.vault_path
    return base_date, vault_path


def next_day(
    logger: Logger,
    config: Config,
    date_str: str | None = None,
    path: str | None = None,
    require_path: bool = False,
) -> int:
    """
    Roll the daily note for ``date_str`` forward one day.

    Args:
        logger: Logger for user-facing output
        config: Runtime configuration (supplies the default vault path)
        date_str: Base date as YYYY-MM-DD
        path: Vault root; falls back to the configured vault path
        require_path: Treat a missing ``path`` as a usage error

    Returns:
        Process exit code. An already existing next-day note is a success.
    """
    try:
        base_date, vault_path = _resolve_options(config, date_str, path, require_path)
    except _OptionError as e:
        logger.error(str(e))
        for hint in e.hints:
            logger.info(hint)
        return 1
    logger.debug(f"Using specified base date: {date_str}")
    logger.debug(f"Vault path: {vault_path}")

    logger.info(f"Creating next day note based on {format_date(base_date)}...")
    try:
        result = create_next_day_note(logger, base_date, vault_path)
    except ObsidianManagerError as e:
        logger.error(f"Failed to create next day note: {e}")
        return 1
    except Exception as e:
        logger.debug(f"Unexpected {type(e).__name__} while creating note")
        logger.error(f"Failed to create next day note: {e!s}")
        return 1

    if isinstance(result, NextDayAlreadyExists):
        logger.info(f"Next day file already exists, nothing to do: {result.path}")
    elif isinstance(result, NextDayCreated):
        logger.info(f"✓ Successfully created: {result.path}")
    return 0

"""Vault layout and path helpers."""

import os
from datetime import date
from pathlib import Path

from obsidian_manager.vault.dates import format_date

DAILY_DIR_NAME = "daily"


def get_daily_dir(base_dir: Path | str | None = None) -> Path:
    """
    Get the daily notes folder path.

    Args:
        base_dir: Vault root (defaults to the current working directory)

    Returns:
        Path to the daily folder
    """
    root = Path(base_dir) if base_dir is not None else Path(os.getcwd())
    return root / DAILY_DIR_NAME


def get_daily_note_path(target_date: date, base_dir: Path | str | None = None) -> Path:
    """
    Get the path of the daily note for a date.

    Args:
        target_date: Date of the note
        base_dir: Vault root (defaults to the current working directory)

    Returns:
        Path like <base_dir>/daily/2025-10-12.md
    """
    # Format: daily/2025-10-12.md
    return get_daily_dir(base_dir) / f"{format_date(target_date)}.md"

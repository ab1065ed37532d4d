"""Vault module for daily notes stored as Markdown.

The vault is the user's Obsidian folder. Daily notes live under
``<vault>/daily/YYYY-MM-DD.md`` and are rolled forward one day at a time,
carrying unfinished TODOs into the new note.
"""

from obsidian_manager.vault.daily import (
    create_next_day_note,
    extract_todo_sections,
    generate_daily_note_content,
)
from obsidian_manager.vault.layout import get_daily_dir, get_daily_note_path

__all__ = [
    "create_next_day_note",
    "extract_todo_sections",
    "generate_daily_note_content",
    "get_daily_dir",
    "get_daily_note_path",
]

"""Daily notes: carry unfinished TODOs forward into the next day's note."""

from datetime import date
from pathlib import Path

from obsidian_manager.core.errors import (
    DirectoryNotFoundError,
    NotFoundError,
    NoteIOError,
)
from obsidian_manager.core.logger import Logger
from obsidian_manager.core.types import (
    NextDayAlreadyExists,
    NextDayCreated,
    NextDayResult,
    TodoSections,
)
from obsidian_manager.vault.dates import format_date, next_day
from obsidian_manager.vault.layout import get_daily_note_path
from obsidian_manager.vault.markdown import (
    build_section,
    extract_section,
    filter_incomplete,
)

TIMELINE_HEADING = "## timeline"
SHORT_TERM_HEADING = "## TODO（短期）"
LONG_TERM_HEADING = "## TODO（長期）"

NOTE_ENCODING = "utf-8"


def extract_todo_sections(note_path: Path) -> TodoSections:
    """
    Read a daily note and pull out its unfinished TODO items.

    Args:
        note_path: Path to the daily note

    Returns:
        Unfinished short-term and long-term checklist lines
    """
    try:
        content = note_path.read_text(encoding=NOTE_ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        raise NoteIOError(f"Failed to read {note_path}: {e}") from e
    return TodoSections(
        short_term=filter_incomplete(extract_section(content, SHORT_TERM_HEADING)),
        long_term=filter_incomplete(extract_section(content, LONG_TERM_HEADING)),
    )


def generate_daily_note_content(
    short_term: list[str],
    long_term: list[str],
) -> str:
    """Render a fresh daily note with an empty timeline and the given TODOs."""
    sections = [
        f"{TIMELINE_HEADING}\n\n",
        build_section(SHORT_TERM_HEADING, short_term),
        build_section(LONG_TERM_HEADING, long_term),
    ]
    return "\n".join(sections)


def create_next_day_note(
    logger: Logger,
    base_date: date,
    base_dir: Path | str,
) -> NextDayResult:
    """
    Create the daily note for the day after ``base_date``.

    Unfinished TODOs from the base note are carried over. An existing
    next-day note is never touched.

    Args:
        logger: Logger for narration
        base_date: Date of the note to roll forward from
        base_dir: Vault root containing the ``daily`` folder

    Returns:
        NextDayCreated with the written path, or NextDayAlreadyExists

    Raises:
        NotFoundError: The base-date note does not exist
        DirectoryNotFoundError: The daily folder does not exist
        NoteIOError: The base note could not be read or the new one written
    """
    base_path = get_daily_note_path(base_date, base_dir)
    logger.debug(f"Base date note: {base_path}")
    if not base_path.exists():
        raise NotFoundError(f"Base date file not found: {base_path}")

    target_date = next_day(base_date)
    target_path = get_daily_note_path(target_date, base_dir)
    logger.debug(f"Next day note ({format_date(target_date)}): {target_path}")

    if target_path.exists():
        logger.info(f"Next day file already exists: {target_path}")
        return NextDayAlreadyExists(path=target_path)

    todos = extract_todo_sections(base_path)
    logger.debug(
        f"Carrying over {len(todos.short_term)} short-term and "
        f"{len(todos.long_term)} long-term TODOs"
    )
    content = generate_daily_note_content(todos.short_term, todos.long_term)

    daily_dir = target_path.parent
    if not daily_dir.is_dir():
        raise DirectoryNotFoundError(f"Daily directory not found: {daily_dir}")

    try:
        target_path.write_text(content, encoding=NOTE_ENCODING, newline="")
    except OSError as e:
        raise NoteIOError(f"Failed to write {target_path}: {e}") from e

    return NextDayCreated(path=target_path)

"""Obsidian Manager core - configuration, logging contract, errors and types."""

from obsidian_manager.core.errors import (
    AppControlError,
    DirectoryNotFoundError,
    LaunchctlError,
    NotFoundError,
    NoteIOError,
    ObsidianManagerError,
    ValidationError,
)
from obsidian_manager.core.logger import Logger, StdLogger, create_logger
from obsidian_manager.core.types import (
    AppController,
    NextDayAlreadyExists,
    NextDayCreated,
    NextDayResult,
    TodoSections,
)

__all__ = [
    # Logging
    "Logger",
    "StdLogger",
    "create_logger",
    # Errors
    "AppControlError",
    "DirectoryNotFoundError",
    "LaunchctlError",
    "NotFoundError",
    "NoteIOError",
    "ObsidianManagerError",
    "ValidationError",
    # Types
    "AppController",
    "NextDayAlreadyExists",
    "NextDayCreated",
    "NextDayResult",
    "TodoSections",
]

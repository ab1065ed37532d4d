"""Shared types and data structures for Obsidian Manager."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from obsidian_manager.core.logger import Logger


@dataclass(frozen=True)
class NextDayCreated:
    """The next-day note was written."""

    path: Path


@dataclass(frozen=True)
class NextDayAlreadyExists:
    """The next-day note was already there; nothing was written."""

    path: Path


NextDayResult = NextDayCreated | NextDayAlreadyExists


@dataclass(frozen=True)
class TodoSections:
    """Unfinished checklist lines pulled from a daily note."""

    short_term: list[str]
    long_term: list[str]


class AppController(Protocol):
    """Starts and stops the desktop app."""

    def start(self, logger: Logger) -> None:
        pass

    def stop(self, logger: Logger) -> None:
        pass


__all__ = [
    "AppController",
    "NextDayAlreadyExists",
    "NextDayCreated",
    "NextDayResult",
    "TodoSections",
]

"""Logger contract used by commands and the daily-note roller.

Commands depend on the ``Logger`` protocol only, so tests can pass a
``MagicMock`` and production code passes a ``StdLogger``.
"""

import logging
from typing import Any, Protocol

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class Logger(Protocol):
    """Narration channel with six severities."""

    def trace(self, message: str, *args: Any) -> None:
        pass

    def debug(self, message: str, *args: Any) -> None:
        pass

    def info(self, message: str, *args: Any) -> None:
        pass

    def warn(self, message: str, *args: Any) -> None:
        pass

    def error(self, message: str, *args: Any) -> None:
        pass

    def fatal(self, message: str, *args: Any) -> None:
        pass


class StdLogger:
    """``Logger`` backed by a standard library ``logging.Logger``."""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def trace(self, message: str, *args: Any) -> None:
        self._logger.log(TRACE, message, *args)

    def debug(self, message: str, *args: Any) -> None:
        self._logger.debug(message, *args)

    def info(self, message: str, *args: Any) -> None:
        self._logger.info(message, *args)

    def warn(self, message: str, *args: Any) -> None:
        self._logger.warning(message, *args)

    def error(self, message: str, *args: Any) -> None:
        self._logger.error(message, *args)

    def fatal(self, message: str, *args: Any) -> None:
        self._logger.critical(message, *args)


def create_logger(name: str = "obsidian-manager") -> Logger:
    """Wrap the named stdlib logger in the ``Logger`` contract."""
    return StdLogger(logging.getLogger(name))

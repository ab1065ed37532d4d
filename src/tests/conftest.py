"""Shared test fixtures and configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from obsidian_manager.core.config import Config, ObsidianConfig, PlistConfig


@pytest.fixture
def mock_logger():
    """Logger double exposing trace/debug/info/warn/error/fatal."""
    logger = MagicMock()
    for name in ("trace", "debug", "info", "warn", "error", "fatal"):
        setattr(logger, name, MagicMock(name=name))
    return logger


@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    """Vault root with an empty daily folder."""
    (tmp_path / "daily").mkdir()
    return tmp_path


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    """Configuration pointing every path into the temp directory."""
    return Config(
        project_root=tmp_path / "prefix",
        plist=PlistConfig(
            label="com.test.obsidian",
            path=tmp_path / "LaunchAgents" / "com.test.obsidian.plist",
        ),
        obsidian=ObsidianConfig(vault_path=tmp_path / "vault"),
        sleepwatcher_path="/usr/local/sbin/sleepwatcher",
    )


@pytest.fixture
def write_note():
    """Factory writing a daily note as UTF-8."""

    def _write_note(vault: Path, name: str, content: str) -> Path:
        path = vault / "daily" / f"{name}.md"
        path.write_text(content, encoding="utf-8")
        return path

    return _write_note


@pytest.fixture
def logged_messages():
    """Collect every message passed to a mock logger channel."""

    def _logged_messages(logger: MagicMock, channel: str) -> list[str]:
        return [c.args[0] for c in getattr(logger, channel).call_args_list]

    return _logged_messages


@pytest.fixture
def restore_root_logger():
    """Put root logger handlers and level back after the test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)

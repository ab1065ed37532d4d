"""Tests for the obsidian_manager.system package."""

import plistlib
import subprocess
from pathlib import Path
from unittest.mock import MagicMock

import pytest

import obsidian_manager.system.launchd as launchd
import obsidian_manager.system.obsidian as obsidian
from obsidian_manager.core.errors import AppControlError, LaunchctlError
from obsidian_manager.system.obsidian import ObsidianApp
from obsidian_manager.system.plist import generate_plist


@pytest.fixture
def mock_subprocess_run(monkeypatch):
    """Stub subprocess.run for both system modules."""
    mock_run = MagicMock(return_value=MagicMock(returncode=0, stdout="", stderr=""))
    monkeypatch.setattr(launchd.subprocess, "run", mock_run)
    monkeypatch.setattr(obsidian.subprocess, "run", mock_run)
    return mock_run


class TestGeneratePlist:
    """Tests for generate_plist."""

    def test_plist_contents(self, test_config):
        """Plist runs sleepwatcher with the sleep and wake scripts."""
        xml = generate_plist(
            test_config, "/bin/om stop", "/bin/om start", home=Path("/Users/test")
        )

        document = plistlib.loads(xml.encode("utf-8"))
        assert document["Label"] == "com.test.obsidian"
        assert document["ProgramArguments"] == [
            "/usr/local/sbin/sleepwatcher",
            "-V",
            "-s",
            "/bin/om stop",
            "-w",
            "/bin/om start",
        ]
        assert document["EnvironmentVariables"] == {
            "PATH": "/usr/local/bin:/usr/bin:/bin:/usr/sbin:/sbin:/opt/homebrew/bin"
        }
        assert document["RunAtLoad"] is True
        assert document["KeepAlive"] is True
        assert (
            document["StandardOutPath"]
            == "/Users/test/Library/Logs/com.test.obsidian.stdout.log"
        )
        assert (
            document["StandardErrorPath"]
            == "/Users/test/Library/Logs/com.test.obsidian.stderr.log"
        )

    def test_plist_is_xml(self, test_config):
        """Output is an XML plist document."""
        xml = generate_plist(test_config, "stop", "start")

        assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert "<!DOCTYPE plist" in xml


class TestLaunchd:
    """Tests for launchctl wrappers."""

    def test_is_installed(self, monkeypatch):
        """is_installed reflects shutil.which."""
        monkeypatch.setattr(launchd.shutil, "which", lambda name: "/usr/bin/" + name)
        assert launchd.is_installed("sleepwatcher") is True

        monkeypatch.setattr(launchd.shutil, "which", lambda name: None)
        assert launchd.is_installed("sleepwatcher") is False

    def test_load_runs_launchctl(self, mock_subprocess_run):
        """load runs launchctl load with an argument list."""
        launchd.load(Path("/tmp/agent.plist"))

        args = mock_subprocess_run.call_args.args[0]
        assert args == ["launchctl", "load", "/tmp/agent.plist"]
        assert "shell" not in mock_subprocess_run.call_args.kwargs

    def test_unload_failure_raises(self, mock_subprocess_run):
        """Non-zero exit raises LaunchctlError with stderr text."""
        mock_subprocess_run.return_value = MagicMock(
            returncode=5, stdout="", stderr="Could not find specified service"
        )

        with pytest.raises(LaunchctlError, match="Could not find specified service"):
            launchd.unload(Path("/tmp/agent.plist"))

    def test_missing_launchctl_raises(self, mock_subprocess_run):
        """OS errors running launchctl become LaunchctlError."""
        mock_subprocess_run.side_effect = FileNotFoundError("launchctl")

        with pytest.raises(LaunchctlError, match="launchctl load failed"):
            launchd.load(Path("/tmp/agent.plist"))

    def test_find_job_matches_label(self, mock_subprocess_run):
        """find_job returns the listing lines containing the label."""
        mock_subprocess_run.return_value = MagicMock(
            returncode=0,
            stdout="PID\tStatus\tLabel\n12345\t0\tcom.test.obsidian\n-\t0\tcom.other\n",
            stderr="",
        )

        assert launchd.find_job("com.test.obsidian") == "12345\t0\tcom.test.obsidian"

    def test_find_job_not_listed(self, mock_subprocess_run):
        """find_job returns None when the label is absent."""
        mock_subprocess_run.return_value = MagicMock(
            returncode=0, stdout="PID\tStatus\tLabel\n", stderr=""
        )

        assert launchd.find_job("com.test.obsidian") is None


class TestObsidianApp:
    """Tests for ObsidianApp."""

    def test_from_config(self, test_config):
        """from_config copies app path and process name."""
        app = ObsidianApp.from_config(test_config)

        assert app.app_path == Path("/Applications/Obsidian.app")
        assert app.process_name == "Obsidian"

    def test_start_opens_app(self, mock_subprocess_run, mock_logger):
        """start runs open on the app bundle."""
        ObsidianApp().start(mock_logger)

        mock_subprocess_run.assert_called_once_with(
            ["open", "/Applications/Obsidian.app"], check=True
        )
        mock_logger.debug.assert_called_with(
            "Executed: open /Applications/Obsidian.app"
        )

    def test_start_failure_raises(self, mock_subprocess_run, mock_logger):
        """A failing open raises AppControlError."""
        mock_subprocess_run.side_effect = subprocess.CalledProcessError(1, ["open"])

        with pytest.raises(AppControlError, match="Failed to open Obsidian"):
            ObsidianApp().start(mock_logger)

    def test_stop_kills_process(self, mock_subprocess_run, mock_logger):
        """stop runs pkill -x with the process name."""
        ObsidianApp().stop(mock_logger)

        mock_subprocess_run.assert_called_once_with(["pkill", "-x", "Obsidian"])
        mock_logger.debug.assert_called_with("Executed: pkill -x Obsidian")

    def test_stop_without_process_is_not_an_error(
        self, mock_subprocess_run, mock_logger
    ):
        """pkill finding nothing is logged at debug and swallowed."""
        mock_subprocess_run.return_value = MagicMock(returncode=1)

        ObsidianApp().stop(mock_logger)

        assert "no process found" in mock_logger.debug.call_args.args[0]
        mock_logger.error.assert_not_called()

    def test_stop_without_pkill_is_not_an_error(
        self, mock_subprocess_run, mock_logger
    ):
        """A missing pkill binary is swallowed too."""
        mock_subprocess_run.side_effect = FileNotFoundError("pkill")

        ObsidianApp().stop(mock_logger)

        assert "pkill could not be run" in mock_logger.debug.call_args.args[0]

"""CLI application for Obsidian Manager using Rich and Typer."""

from dataclasses import dataclass
from typing import Optional

import typer
from rich.console import Console

from obsidian_manager import __version__
from obsidian_manager.commands.install import install
from obsidian_manager.commands.next_day import next_day
from obsidian_manager.commands.start import start
from obsidian_manager.commands.status import status
from obsidian_manager.commands.stop import stop
from obsidian_manager.commands.uninstall import uninstall
from obsidian_manager.core import config as core_config
from obsidian_manager.core.config import Config, create_config, setup_logging
from obsidian_manager.core.logger import Logger, StdLogger
from obsidian_manager.system.obsidian import ObsidianApp

app = typer.Typer(
    name="obsidian-manager",
    help="Manage Obsidian app with sleep/wake events",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()


@dataclass
class CliState:
    """Objects shared by all subcommands of one invocation."""

    logger: Logger
    config: Config


def _debug_option():
    return typer.Option(False, "--debug", help="Enable debug logging")


def _state(ctx: typer.Context, debug: bool = False) -> CliState:
    if debug:
        setup_logging(True)
    return ctx.obj


def _version_callback(value: bool):
    if value:
        console.print(f"obsidian-manager {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = _debug_option(),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    """Manage Obsidian app with sleep/wake events."""
    std_logger = setup_logging(debug or core_config.DEBUG)
    ctx.obj = CliState(logger=StdLogger(std_logger), config=create_config())


@app.command("install")
def install_command(ctx: typer.Context, debug: bool = _debug_option()):
    """Install LaunchAgent to manage Obsidian on sleep/wake."""
    state = _state(ctx, debug)
    raise typer.Exit(install(state.logger, state.config))


@app.command("uninstall")
def uninstall_command(ctx: typer.Context, debug: bool = _debug_option()):
    """Uninstall LaunchAgent."""
    state = _state(ctx, debug)
    raise typer.Exit(uninstall(state.logger, state.config))


@app.command("status")
def status_command(ctx: typer.Context, debug: bool = _debug_option()):
    """Check LaunchAgent status."""
    state = _state(ctx, debug)
    raise typer.Exit(status(state.logger, state.config))


@app.command("start")
def start_command(ctx: typer.Context, debug: bool = _debug_option()):
    """Manually start Obsidian."""
    state = _state(ctx, debug)
    obsidian = ObsidianApp.from_config(state.config)
    raise typer.Exit(start(state.logger, obsidian))


@app.command("stop")
def stop_command(ctx: typer.Context, debug: bool = _debug_option()):
    """Manually stop Obsidian."""
    state = _state(ctx, debug)
    obsidian = ObsidianApp.from_config(state.config)
    raise typer.Exit(stop(state.logger, obsidian))


@app.command("next-day")
def next_day_command(
    ctx: typer.Context,
    date: Optional[str] = typer.Option(
        None,
        "--date",
        "-d",
        metavar="YYYY-MM-DD",
        help="Base date (required)",
    ),
    path: Optional[str] = typer.Option(
        None,
        "--path",
        "-p",
        help="Obsidian Vault path (required)",
    ),
    debug: bool = _debug_option(),
):
    """Create next day daily note with TODOs from previous day."""
    state = _state(ctx, debug)
    raise typer.Exit(
        next_day(
            state.logger,
            state.config,
            date_str=date,
            path=path,
            require_path=True,
        )
    )


def run_cli():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run_cli()

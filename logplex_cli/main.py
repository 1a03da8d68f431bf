"""
Logplex CLI Application.

Built with Typer for type-safe commands; results are JSON on stdout,
errors and logs go to stderr.

Usage:
    logplex-cli --help
    logplex-cli channel create <name> <token>...
    logplex-cli channel destroy <channelId>
    logplex-cli drain add <channelId> <drainUrl>
    logplex-cli drain remove <channelId> <drainId>

Options:
    --verbose, -v     Enable verbose output (INFO level logging)
    --debug, -d       Enable debug mode (DEBUG level logging)
    --version         Show version and exit
"""

import typer

from logplex_cli import __version__
from logplex_cli.commands import channel_app, drain_app
from logplex_cli.core.logging import get_logger, setup_logging

logger = get_logger(__name__)

app = typer.Typer(
    name="logplex-cli",
    help="Logplex CLI - manage channels and drains.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(channel_app, name="channel")
app.add_typer(drain_app, name="drain")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"logplex-cli {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Logplex CLI.

    Create and destroy channels, add and remove drains. Configuration
    comes from LOGPLEX_* environment variables.
    """
    if debug:
        setup_logging(level="DEBUG")
        logger.debug("Debug mode enabled")
    elif verbose:
        setup_logging(level="INFO")
    else:
        setup_logging()

"""
Command Dispatch.

Each CLI form parses into one typed command value. execute() runs a
single command end to end: resolve configuration, issue one API call,
print the result.
"""

from dataclasses import dataclass

import typer
from pydantic import BaseModel

from logplex_cli.client import LogplexClient
from logplex_cli.core.config import LogplexConfig, resolve_config
from logplex_cli.core.exceptions import ConfigurationError, LogplexError
from logplex_cli.core.logging import get_logger, log_with_source, setup_logging
from logplex_cli.output import print_error, print_result

logger = get_logger(__name__)


@dataclass(frozen=True)
class CreateChannel:
    """channel create <name> <token>..."""

    name: str
    tokens: tuple[str, ...]


@dataclass(frozen=True)
class DestroyChannel:
    """channel destroy <channelId>"""

    channel_id: str


@dataclass(frozen=True)
class AddDrain:
    """drain add <channelId> <drainUrl>"""

    channel_id: str
    drain_url: str


@dataclass(frozen=True)
class RemoveDrain:
    """drain remove <channelId> <drainId>"""

    channel_id: str
    drain_id: str


Command = CreateChannel | DestroyChannel | AddDrain | RemoveDrain


def run_command(command: Command, client: LogplexClient) -> BaseModel | None:
    """
    Issue the API call for a command.

    Returns:
        The parsed response model for create operations, None for deletes.

    Raises:
        LogplexError: On transport, status or decode failure.
    """
    if isinstance(command, CreateChannel):
        return client.create_channel(command.name, list(command.tokens))
    if isinstance(command, DestroyChannel):
        client.destroy_channel(command.channel_id)
        return None
    if isinstance(command, AddDrain):
        return client.add_drain(command.channel_id, command.drain_url)
    if isinstance(command, RemoveDrain):
        client.remove_drain(command.channel_id, command.drain_id)
        return None
    raise TypeError(f"Unknown command: {command!r}")


def load_config() -> LogplexConfig:
    """Resolve configuration, exiting with status 1 when it is incomplete."""
    try:
        config = resolve_config()
    except ConfigurationError as e:
        print_error(e.message)
        raise typer.Exit(1) from e

    if config.debug:
        setup_logging(level="DEBUG")

    log_with_source(logger, "config", "debug", "Resolved configuration", config=config.redacted())
    return config


def execute(command: Command) -> None:
    """
    Run one command and print its result.

    Exits with status 1 on any configuration or API failure. No client
    is constructed until configuration has been resolved.
    """
    config = load_config()
    log_with_source(logger, "cli", "debug", "Parsed command", command=repr(command))

    try:
        with LogplexClient(config) as client:
            result = run_command(command, client)
    except LogplexError as e:
        log_with_source(logger, "cli", "debug", "Command failed", code=e.code)
        print_error(e.message)
        raise typer.Exit(1) from e

    print_result(result)

"""
Drain Commands.

Commands for attaching and detaching channel drains.
"""

import typer

from logplex_cli.dispatch import AddDrain, RemoveDrain, execute

app = typer.Typer(help="Drain commands", no_args_is_help=True)


@app.command()
def add(
    channel_id: str = typer.Argument(..., metavar="CHANNEL_ID", help="Channel to drain"),
    drain_url: str = typer.Argument(..., metavar="DRAIN_URL", help="Destination URL"),
) -> None:
    """
    Add a drain to a channel.

    Prints the drain id, token and URL.

    Examples:
        logplex-cli drain add 42 syslog://logs.example.com:514
    """
    execute(AddDrain(channel_id=channel_id, drain_url=drain_url))


@app.command()
def remove(
    channel_id: str = typer.Argument(..., metavar="CHANNEL_ID", help="Channel the drain belongs to"),
    drain_id: str = typer.Argument(..., metavar="DRAIN_ID", help="Drain to remove"),
) -> None:
    """
    Remove a drain from a channel.

    Examples:
        logplex-cli drain remove 42 7
    """
    execute(RemoveDrain(channel_id=channel_id, drain_id=drain_id))

"""
Channel Commands.

Commands for creating and destroying Logplex channels.
"""

import typer

from logplex_cli.dispatch import CreateChannel, DestroyChannel, execute

app = typer.Typer(help="Channel commands", no_args_is_help=True)


@app.command()
def create(
    name: str = typer.Argument(..., help="Channel name"),
    tokens: list[str] = typer.Argument(..., metavar="TOKEN...", help="One or more token names"),
) -> None:
    """
    Create a channel with one or more tokens.

    Prints the new channel id and the token values keyed by token name.

    Examples:
        logplex-cli channel create myapp app
        logplex-cli channel create myapp app heroku
    """
    execute(CreateChannel(name=name, tokens=tuple(tokens)))


@app.command()
def destroy(
    channel_id: str = typer.Argument(..., metavar="CHANNEL_ID", help="Channel to delete"),
) -> None:
    """
    Destroy a channel.

    Examples:
        logplex-cli channel destroy 42
    """
    execute(DestroyChannel(channel_id=channel_id))

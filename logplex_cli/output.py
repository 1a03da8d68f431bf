"""
Command Output.

Results go to stdout as one line of compact JSON for scriptability.
Errors go to stderr through a Rich console.
"""

import json
from typing import Any

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape

err_console = Console(stderr=True)


def render_result(value: Any) -> str:
    """Serialize a command result as single-line JSON. None renders as {}."""
    if value is None:
        return "{}"
    if isinstance(value, BaseModel):
        return value.model_dump_json(by_alias=True)
    return json.dumps(value, separators=(",", ":"), default=str)


def print_result(value: Any) -> None:
    """Write the rendered result to stdout."""
    typer.echo(render_result(value))


def print_error(message: str) -> None:
    """Write an error message to stderr."""
    err_console.print(
        f"[red]Error: {escape(message)}[/red]",
        soft_wrap=True,
        highlight=False,
        emoji=False,
    )

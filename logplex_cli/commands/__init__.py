"""
CLI Commands.

Organized by Logplex resource.
"""

from logplex_cli.commands.channel import app as channel_app
from logplex_cli.commands.drain import app as drain_app

__all__ = [
    "channel_app",
    "drain_app",
]

"""
Logplex CLI.

Command-line client for the Logplex administrative API.

Architecture:
- core/       configuration, exceptions, logging
- client.py   HTTP client (httpx) for the Logplex REST API
- dispatch.py typed command values and the single-command executor
- commands/   Typer command groups (channel, drain)

Usage:
    logplex-cli channel create <name> <token>...
    logplex-cli channel destroy <channelId>
    logplex-cli drain add <channelId> <drainUrl>
    logplex-cli drain remove <channelId> <drainId>
"""

__version__ = "0.1.0"

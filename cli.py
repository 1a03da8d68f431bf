#!/usr/bin/env python3
"""
Logplex CLI.

Entry point for running from a source checkout.

Usage:
    python cli.py --help
    python cli.py channel create <name> <token>...
    python cli.py channel destroy <channelId>
    python cli.py drain add <channelId> <drainUrl>
    python cli.py drain remove <channelId> <drainId>

Environment:
    LOGPLEX_AUTH_KEY must be set, along with either LOGPLEX_ENDPOINT or
    HEROKU_CLOUD. See logplex_cli/core/config.py.
"""

from logplex_cli.main import app

if __name__ == "__main__":
    app(prog_name="logplex-cli")

"""Allow running as ``python -m logplex_cli``."""

from logplex_cli.main import app

app(prog_name="logplex-cli")

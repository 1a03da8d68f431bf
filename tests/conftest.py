"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Every test starts from an environment with no Logplex variables set,
so the developer's own shell configuration never leaks into results.
"""

import logging
from collections.abc import Generator

import pytest
import structlog

LOGPLEX_ENV_VARS = (
    "LOGPLEX_ENDPOINT",
    "LOGPLEX_AUTH_KEY",
    "LOGPLEX_HEROKU_CLOUD",
    "HEROKU_CLOUD",
    "LOGPLEX_DEBUG",
    "DEBUG",
    "LOGPLEX_SSL_INSECURE",
    "SSL_INSECURE",
    "LOGPLEX_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all Logplex-related variables from the environment."""
    for name in LOGPLEX_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers installed by setup_logging so they never outlive a test."""
    yield
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(logging.WARNING)
    structlog.reset_defaults()

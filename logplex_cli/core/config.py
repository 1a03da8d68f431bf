"""
Configuration Management.

Loads settings from the environment and resolves them into a single
immutable LogplexConfig. The resolved value is passed explicitly to the
dispatcher and the HTTP client; nothing here is mutated after startup.

Environment:
    LOGPLEX_ENDPOINT        - API base URL (derived from the cloud when unset)
    LOGPLEX_AUTH_KEY        - Credential for the Authorization header (required)
    LOGPLEX_HEROKU_CLOUD    - Deployment cloud name (also HEROKU_CLOUD)
    LOGPLEX_DEBUG           - Debug logging (also DEBUG)
    LOGPLEX_SSL_INSECURE    - Skip TLS verification (also SSL_INSECURE)
    LOGPLEX_TIMEOUT         - Request timeout in seconds (no timeout when unset)
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from logplex_cli.core.exceptions import ConfigurationError

CLOUD_ENDPOINTS: dict[str, str] = {
    "production": "https://logs-api.heroku.com",
    "ops": "https://logs-api.herokai.com",
}
"""Known deployment clouds and their public API endpoints."""

DEV_CLOUD_ENDPOINT = "https://logplex-api-ssl.ssl.{cloud}.herokudev.com"
"""Endpoint pattern for any other cloud. These use self-signed certificates."""

AUTH_KEY_HINT = (
    "$LOGPLEX_AUTH_KEY is not set; retrieve it using "
    "`ion-client config:get -a logplex LOGPLEX_AUTH_KEY`"
)


class Settings(BaseSettings):
    """Raw settings read from environment variables."""

    endpoint: str = ""
    auth_key: str = ""
    heroku_cloud: str = Field(
        default="",
        validation_alias=AliasChoices("LOGPLEX_HEROKU_CLOUD", "HEROKU_CLOUD"),
    )
    debug: bool = Field(
        default=False,
        validation_alias=AliasChoices("LOGPLEX_DEBUG", "DEBUG"),
    )
    ssl_insecure: bool = Field(
        default=False,
        validation_alias=AliasChoices("LOGPLEX_SSL_INSECURE", "SSL_INSECURE"),
    )
    timeout: float | None = Field(default=None, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="LOGPLEX_",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
        populate_by_name=True,
    )


class TransportConfig(BaseModel):
    """HTTP transport options handed to the API client constructor."""

    verify: bool = True
    timeout: float | None = None

    model_config = ConfigDict(frozen=True)


class LogplexConfig(BaseModel):
    """Fully resolved configuration. Endpoint and auth key are never empty."""

    endpoint: str = Field(min_length=1)
    auth_key: str = Field(min_length=1)
    heroku_cloud: str = ""
    debug: bool = False
    ssl_insecure: bool = False
    timeout: float | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def transport(self) -> TransportConfig:
        """Transport options derived from the TLS and timeout settings."""
        return TransportConfig(verify=not self.ssl_insecure, timeout=self.timeout)

    def redacted(self) -> dict[str, Any]:
        """Configuration as a dict with the auth key masked, for debug logs."""
        data = self.model_dump()
        data["auth_key"] = "*" * 8
        return data


def load_settings() -> Settings:
    """Read settings from the environment, rejecting malformed values."""
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(
            f"not all environment vars are set correctly ({e})"
        ) from e


def endpoint_for_cloud(cloud: str) -> tuple[str, bool]:
    """
    Map a deployment cloud name to its API endpoint.

    Args:
        cloud: Cloud identifier, e.g. "production" or "ops".

    Returns:
        Tuple of (endpoint_url, force_ssl_insecure). Unknown clouds map to
        the development endpoint pattern and force TLS-insecure mode.
    """
    if cloud in CLOUD_ENDPOINTS:
        return CLOUD_ENDPOINTS[cloud], False
    return DEV_CLOUD_ENDPOINT.format(cloud=cloud), True


def resolve_config(settings: Settings | None = None) -> LogplexConfig:
    """
    Resolve settings into the configuration used for the whole invocation.

    Args:
        settings: Pre-loaded settings. If None, reads the environment.

    Returns:
        Immutable LogplexConfig.

    Raises:
        ConfigurationError: If neither endpoint nor cloud is set, or the
            auth key is missing.
    """
    if settings is None:
        settings = load_settings()

    endpoint = settings.endpoint.strip().rstrip("/")
    ssl_insecure = settings.ssl_insecure

    if not endpoint:
        cloud = settings.heroku_cloud.strip()
        if not cloud:
            raise ConfigurationError(
                "Either $HEROKU_CLOUD or $LOGPLEX_ENDPOINT must be set"
            )
        endpoint, force_insecure = endpoint_for_cloud(cloud)
        ssl_insecure = ssl_insecure or force_insecure

    if not settings.auth_key:
        raise ConfigurationError(AUTH_KEY_HINT)

    return LogplexConfig(
        endpoint=endpoint,
        auth_key=settings.auth_key,
        heroku_cloud=settings.heroku_cloud.strip(),
        debug=settings.debug,
        ssl_insecure=ssl_insecure,
        timeout=settings.timeout,
    )

"""
Logplex Schemas.

Pydantic models for Logplex API request bodies and response payloads.

Responses are parsed from the snake_case wire names and rendered on
stdout under the CLI's output names (ChannelId, Tokens, Id, Token, Url).
"""

from pydantic import BaseModel, ConfigDict, Field


class ChannelCreateRequest(BaseModel):
    """Body of POST /channels."""

    name: str = Field(description="Channel name")
    tokens: list[str] = Field(description="Token names to create, in order")


class ChannelCreateResponse(BaseModel):
    """Payload of a 201 response to channel creation."""

    channel_id: int = Field(
        validation_alias="channel_id",
        serialization_alias="ChannelId",
        description="Channel identifier",
    )
    tokens: dict[str, str] = Field(
        validation_alias="tokens",
        serialization_alias="Tokens",
        description="Token name to token value",
    )

    model_config = ConfigDict(frozen=True, strict=True)


class DrainAddRequest(BaseModel):
    """Body of POST /v2/channels/{channel_id}/drains."""

    url: str = Field(description="Drain destination URL")


class DrainAddResponse(BaseModel):
    """Payload of a 201 response to drain creation."""

    id: int = Field(validation_alias="id", serialization_alias="Id")
    token: str = Field(validation_alias="token", serialization_alias="Token")
    url: str = Field(validation_alias="url", serialization_alias="Url")

    model_config = ConfigDict(frozen=True, strict=True)

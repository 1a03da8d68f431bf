"""Unit tests for Logplex request/response schemas."""

import pytest
from pydantic import ValidationError

from logplex_cli.schemas import (
    ChannelCreateRequest,
    ChannelCreateResponse,
    DrainAddRequest,
    DrainAddResponse,
)


class TestChannelSchemas:
    """Tests for channel request/response models."""

    def test_request_body_keeps_token_order(self):
        request = ChannelCreateRequest(name="app", tokens=["b", "a", "c"])
        assert request.model_dump() == {"name": "app", "tokens": ["b", "a", "c"]}

    def test_response_parses_wire_names(self):
        response = ChannelCreateResponse.model_validate(
            {"channel_id": 42, "tokens": {"t1": "abc"}}
        )
        assert response.channel_id == 42
        assert response.tokens == {"t1": "abc"}

    def test_response_serializes_output_names(self):
        response = ChannelCreateResponse.model_validate(
            {"channel_id": 42, "tokens": {"t1": "abc"}}
        )
        assert response.model_dump_json(by_alias=True) == '{"ChannelId":42,"Tokens":{"t1":"abc"}}'

    def test_response_requires_channel_id(self):
        with pytest.raises(ValidationError):
            ChannelCreateResponse.model_validate({"tokens": {}})

    def test_response_rejects_non_integer_id(self):
        with pytest.raises(ValidationError):
            ChannelCreateResponse.model_validate({"channel_id": "abc", "tokens": {}})

    @pytest.mark.parametrize("channel_id", [True, "42", 42.0])
    def test_response_rejects_loosely_typed_id(self, channel_id):
        with pytest.raises(ValidationError):
            ChannelCreateResponse.model_validate({"channel_id": channel_id, "tokens": {"t1": "abc"}})

    def test_response_rejects_non_string_token_value(self):
        with pytest.raises(ValidationError):
            ChannelCreateResponse.model_validate({"channel_id": 42, "tokens": {"t1": 7}})


class TestDrainSchemas:
    """Tests for drain request/response models."""

    def test_request_body(self):
        assert DrainAddRequest(url="syslog://h:514").model_dump() == {"url": "syslog://h:514"}

    def test_response_round_trip_names(self):
        response = DrainAddResponse.model_validate(
            {"id": 7, "token": "d.abc", "url": "syslog://h:514"}
        )
        assert response.model_dump(by_alias=True) == {
            "Id": 7,
            "Token": "d.abc",
            "Url": "syslog://h:514",
        }

    def test_response_requires_token(self):
        with pytest.raises(ValidationError):
            DrainAddResponse.model_validate({"id": 7, "url": "syslog://h:514"})

    @pytest.mark.parametrize("drain_id", [True, "7", 7.0])
    def test_response_rejects_loosely_typed_id(self, drain_id):
        with pytest.raises(ValidationError):
            DrainAddResponse.model_validate({"id": drain_id, "token": "d.abc", "url": "https://d"})

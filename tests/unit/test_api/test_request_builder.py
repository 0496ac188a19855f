"""
Unit tests for the RequestBuilder.

Tests payload resolution, JSON encoding, content-type handling and context
checks.
"""

import io
import json
import math

import pytest

from atlassian_client.api.context import Context
from atlassian_client.api.models import ScreenSchemePayloadScheme, ScreenTypesScheme
from atlassian_client.api.request_builder import (
    JSONBody, NoBody, Payload, RawBody, RequestBuilder, to_payload
)
from atlassian_client.core.error_handler import (
    Cancelled, DeadlineExceeded, EncodingError, RequestBuildError
)


URL = "https://example.atlassian.net/rest/api/3/screenscheme"


class TestRequestBuilder:
    """Test suite for RequestBuilder"""

    @pytest.fixture
    def builder(self):
        return RequestBuilder()

    @pytest.fixture
    def ctx(self):
        return Context.background()

    @pytest.mark.unit
    def test_no_payload_has_no_body_or_content_type(self, builder, ctx):
        request = builder.build(ctx, 'get', URL)

        assert request.method == 'GET'
        assert request.url == URL
        assert request.body is None
        assert 'Content-Type' not in request.headers
        assert request.context is ctx

    @pytest.mark.unit
    def test_dict_payload_is_json_encoded(self, builder, ctx):
        payload = {"name": "Employee screen scheme", "screens": {"default": 10017}}
        request = builder.build(ctx, 'POST', URL, payload)

        assert json.loads(request.body) == payload
        assert request.headers['Content-Type'] == 'application/json'

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [
        {"a": [1, 2, {"b": None}], "c": "ü"},
        [1, "two", 3.5, True, None],
        "plain string",
        0,
        {},
    ])
    def test_json_payload_round_trips(self, builder, ctx, value):
        request = builder.build(ctx, 'PUT', URL, value)
        assert json.loads(request.body.decode('utf-8')) == value

    @pytest.mark.unit
    def test_pydantic_payload_uses_aliases_and_omits_none(self, builder, ctx):
        payload = ScreenSchemePayloadScheme(
            name="Employee screen scheme",
            screens=ScreenTypesScheme(default=10017, edit=10019)
        )
        request = builder.build(ctx, 'POST', URL, payload)

        assert json.loads(request.body) == {
            "name": "Employee screen scheme",
            "screens": {"default": 10017, "edit": 10019}
        }

    @pytest.mark.unit
    def test_pydantic_model_nested_in_dict(self, builder, ctx):
        screens = ScreenTypesScheme(default=1)
        request = builder.build(ctx, 'POST', URL, {"screens": screens})
        assert json.loads(request.body) == {"screens": {"default": 1}}

    @pytest.mark.unit
    def test_raw_bytes_are_sent_as_is(self, builder, ctx):
        raw = b'{"name":"prebuilt"}'
        request = builder.build(ctx, 'POST', URL, raw)

        assert request.body == raw
        assert request.headers['Content-Type'] == 'application/json'

    @pytest.mark.unit
    def test_file_like_payload_is_read(self, builder, ctx):
        request = builder.build(ctx, 'POST', URL, io.BytesIO(b'[1,2]'))
        assert request.body == b'[1,2]'

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [
        {"when": object()},
        {"ratio": math.nan},
        {1, 2, 3},
    ])
    def test_unencodable_payload_raises_encoding_error(self, builder, ctx, value):
        with pytest.raises(EncodingError):
            builder.build(ctx, 'POST', URL, value)

    @pytest.mark.unit
    def test_circular_payload_raises_encoding_error(self, builder, ctx):
        payload = {}
        payload["self"] = payload
        with pytest.raises(EncodingError):
            builder.build(ctx, 'POST', URL, payload)

    @pytest.mark.unit
    def test_missing_context(self, builder):
        with pytest.raises(RequestBuildError):
            builder.build(None, 'GET', URL)

    @pytest.mark.unit
    @pytest.mark.parametrize("method", ["", "GE T", None, "POST\r\n"])
    def test_invalid_method(self, builder, ctx, method):
        with pytest.raises(RequestBuildError):
            builder.build(ctx, method, URL)

    @pytest.mark.unit
    def test_cancelled_context_is_rejected(self, builder, ctx):
        child, cancel = ctx.with_cancel()
        cancel()
        with pytest.raises(Cancelled):
            builder.build(child, 'GET', URL)

    @pytest.mark.unit
    def test_expired_context_is_rejected(self, builder, ctx):
        with pytest.raises(DeadlineExceeded):
            builder.build(ctx.with_timeout(-1), 'GET', URL)


class TestToPayload:
    """Test suite for payload resolution"""

    @pytest.mark.unit
    def test_shapes(self):
        assert isinstance(to_payload(None), NoBody)
        assert isinstance(to_payload(b'x'), RawBody)
        assert isinstance(to_payload(bytearray(b'x')), RawBody)
        assert isinstance(to_payload({"a": 1}), JSONBody)

    @pytest.mark.unit
    def test_payload_instances_pass_through(self):
        body = RawBody(b'abc')
        assert to_payload(body) is body

    @pytest.mark.unit
    def test_payload_base_is_abstract(self):
        with pytest.raises(TypeError):
            Payload()

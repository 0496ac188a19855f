"""
Request Builder for the Atlassian API Client

Turns a method, an absolute URL and an optional payload into a transient
Request value. Payloads are resolved into one of three shapes up front so
encoding failures surface here, before the transport is involved.
"""

import json
import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from pydantic import BaseModel
from requests.structures import CaseInsensitiveDict

from ..core.error_handler import EncodingError, RequestBuildError
from .context import Context


JSON_CONTENT_TYPE = 'application/json'

# RFC 7230 token
_METHOD_TOKEN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


class Payload(ABC):
    """Base class of the resolved request body shapes"""

    @abstractmethod
    def encode(self) -> Optional[bytes]:
        """Body bytes, or None when the request carries no body"""
        pass


class NoBody(Payload):
    """The request carries no body"""

    def encode(self) -> Optional[bytes]:
        return None

    def __repr__(self):
        return "NoBody()"


class RawBody(Payload):
    """Pre-built bytes sent as-is"""

    def __init__(self, data: Union[bytes, bytearray, memoryview]):
        self.data = bytes(data)

    def encode(self) -> Optional[bytes]:
        return self.data

    def __repr__(self):
        return f"RawBody({len(self.data)} bytes)"


class JSONBody(Payload):
    """A structured value serialized to JSON"""

    def __init__(self, value: Any):
        self.value = value

    def encode(self) -> Optional[bytes]:
        if isinstance(self.value, BaseModel):
            try:
                return self.value.model_dump_json(by_alias=True, exclude_none=True).encode('utf-8')
            except (TypeError, ValueError) as e:
                raise EncodingError(f"Cannot encode {type(self.value).__name__} as JSON: {e}") from e

        try:
            return json.dumps(
                self.value,
                allow_nan=False,
                separators=(',', ':'),
                default=_encode_default
            ).encode('utf-8')
        except (TypeError, ValueError, RecursionError) as e:
            raise EncodingError(f"Cannot encode {type(self.value).__name__} as JSON: {e}") from e

    def __repr__(self):
        return f"JSONBody({type(self.value).__name__})"


def check_header_value(name: str, value: str):
    """
    Reject header values http.client cannot send

    Raises:
        EncodingError: If the value is not latin-1 encodable
    """
    try:
        value.encode('latin-1')
    except UnicodeEncodeError as e:
        raise EncodingError(f"{name} header value cannot be encoded as latin-1") from e


def _encode_default(value: Any) -> Any:
    """Let pydantic models nested inside plain containers serialize"""
    if isinstance(value, BaseModel):
        return value.model_dump(mode='json', by_alias=True, exclude_none=True)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_payload(value: Any) -> Payload:
    """
    Resolve a caller supplied payload into its body shape

    ``None`` means no body, bytes-like values and binary file objects are
    raw bodies, everything else is JSON-encoded.
    """
    if isinstance(value, Payload):
        return value
    if value is None:
        return NoBody()
    if isinstance(value, (bytes, bytearray, memoryview)):
        return RawBody(value)
    if hasattr(value, 'read') and callable(value.read):
        data = value.read()
        if isinstance(data, str):
            data = data.encode('utf-8')
        return RawBody(data)
    return JSONBody(value)


@dataclass
class Request:
    """A single outgoing call, consumed once by the transport"""
    method: str
    url: str
    context: Context
    body: Optional[bytes] = None
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)

    def __repr__(self):
        size = len(self.body) if self.body is not None else 0
        return f"<Request {self.method} {self.url} body={size}B>"


class RequestBuilder:
    """
    Builds Request values for the transport.

    Content-Type is set only when a body is present; Accept is left to the
    calling operation.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def build(self, ctx: Context, method: str, url: str, payload: Any = None) -> Request:
        """
        Build a request

        Args:
            ctx: Cancellation/deadline context carried by the request
            method: HTTP method
            url: Absolute URL, already resolved
            payload: None, bytes-like, binary file object or JSON-serializable value

        Returns:
            The assembled Request

        Raises:
            RequestBuildError: If the context is missing or the method is invalid
            EncodingError: If the payload cannot be serialized
            Cancelled, DeadlineExceeded: If the context has already ended
        """
        if ctx is None:
            raise RequestBuildError("a context is required, use Context.background()")

        if not isinstance(method, str) or not _METHOD_TOKEN.fullmatch(method):
            raise RequestBuildError(f"invalid HTTP method: {method!r}")

        ended = ctx.err()
        if ended is not None:
            raise ended

        body = to_payload(payload).encode()

        request = Request(method=method.upper(), url=url, context=ctx, body=body)
        if body is not None:
            request.headers['Content-Type'] = JSON_CONTENT_TYPE

        self.logger.debug(f"Built {request!r}")
        return request

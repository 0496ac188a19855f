"""
Response Handling for the Atlassian API Client

The transport wraps every received HTTP reply in a normalized Response.
Classifying status codes and decoding JSON happen later, in the operation
that issued the call, through the helpers below.
"""

import json
import types
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError
from requests.structures import CaseInsensitiveDict

from ..core.error_handler import DecodingError, HTTPStatusError


T = TypeVar('T')


def _freeze_headers(headers: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return types.MappingProxyType(CaseInsensitiveDict(headers or {}))


@dataclass(frozen=True)
class Response:
    """Normalized HTTP reply, whatever its status code"""
    status_code: int
    body: bytes
    endpoint: str
    headers: Mapping[str, str] = field(default_factory=lambda: _freeze_headers(None))
    method: Optional[str] = None
    reason: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.headers, types.MappingProxyType):
            object.__setattr__(self, 'headers', _freeze_headers(self.headers))

    @property
    def ok(self) -> bool:
        """True for 2xx statuses"""
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.body.decode('utf-8', errors='replace')

    @property
    def content_type(self) -> str:
        return self.headers.get('Content-Type', '')

    def __repr__(self):
        return f"<Response [{self.status_code}] {self.method or ''} {self.endpoint} {len(self.body)}B>"


def raise_for_status(response: Response) -> Response:
    """
    Raise HTTPStatusError for a non-2xx response

    Returns:
        The same response, for chaining
    """
    if response.ok:
        return response

    detail = _extract_error_message(response)
    message = f"HTTP {response.status_code} from {response.method or 'request'} {response.endpoint}"
    if detail:
        message = f"{message}: {detail}"
    raise HTTPStatusError(message, response)


def _extract_error_message(response: Response) -> Optional[str]:
    """Pull a readable message out of an Atlassian error body"""
    try:
        error_data = json.loads(response.body)
    except ValueError:
        return response.text[:200] or response.reason

    if not isinstance(error_data, dict):
        return str(error_data)[:200]

    messages = error_data.get('errorMessages')
    if messages:
        return '; '.join(str(m) for m in messages)

    errors = error_data.get('errors')
    if isinstance(errors, dict) and errors:
        return '; '.join(f"{k}: {v}" for k, v in errors.items())
    if isinstance(errors, list) and errors:
        return '; '.join(str(e.get('title', e)) if isinstance(e, dict) else str(e) for e in errors)

    return error_data.get('message') or error_data.get('detail') or response.reason


def decode_json(response: Response, model: Optional[Type[T]] = None) -> Any:
    """
    Decode the raw body of a response

    Args:
        response: Normalized response
        model: Optional pydantic model (or any type pydantic can validate)

    Returns:
        The decoded value, a model instance when ``model`` is given, or None
        for an empty body

    Raises:
        DecodingError: If the body is not JSON or does not fit ``model``
    """
    if not response.body.strip():
        return None

    try:
        data = json.loads(response.body)
    except ValueError as e:
        raise DecodingError(f"Invalid JSON in response from {response.endpoint}: {e}", response) from e

    if model is None:
        return data

    try:
        if isinstance(model, type) and issubclass(model, BaseModel):
            return model.model_validate(data)
        return TypeAdapter(model).validate_python(data)
    except ValidationError as e:
        raise DecodingError(
            f"Response from {response.endpoint} does not match {getattr(model, '__name__', model)}: {e}",
            response
        ) from e

"""Typed client library for the Atlassian Cloud REST APIs."""

__version__ = '1.0.0'

from .api import (
    AdminClient,
    Authenticator,
    Client,
    Context,
    JiraClient,
    Request,
    Response,
    background,
    decode_json,
    raise_for_status,
    resolve
)
from .core import (
    AtlassianClientError,
    Cancelled,
    ClientConfig,
    ConfigManager,
    DeadlineExceeded,
    DecodingError,
    EncodingError,
    HTTPStatusError,
    InvalidURL,
    LoggingManager,
    TransportFailure
)

__all__ = [
    'AdminClient',
    'Authenticator',
    'Client',
    'Context',
    'JiraClient',
    'Request',
    'Response',
    'background',
    'decode_json',
    'raise_for_status',
    'resolve',
    'AtlassianClientError',
    'Cancelled',
    'ClientConfig',
    'ConfigManager',
    'DeadlineExceeded',
    'DecodingError',
    'EncodingError',
    'HTTPStatusError',
    'InvalidURL',
    'LoggingManager',
    'TransportFailure'
]

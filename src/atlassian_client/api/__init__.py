"""
Atlassian API Client Package

Request pipeline shared by every Atlassian service: endpoint resolution,
request building, authentication and single-shot transport execution with
normalized responses.
"""

from .authentication import Authenticator, HTTPBearerAuth
from .client import Client
from .context import Context, background
from .endpoint_resolver import resolve
from .request_builder import Request, RequestBuilder
from .response_handler import Response, decode_json, raise_for_status
from .platforms import AdminClient, JiraClient

__all__ = [
    'Authenticator',
    'HTTPBearerAuth',
    'Client',
    'Context',
    'background',
    'resolve',
    'Request',
    'RequestBuilder',
    'Response',
    'decode_json',
    'raise_for_status',
    'AdminClient',
    'JiraClient'
]

"""
Authentication Management for the Atlassian API Client

Holds the credential material of a client and stamps it onto outgoing
requests. Only one credential scheme is active at a time.
"""

import logging
from typing import Optional

from requests.auth import AuthBase, HTTPBasicAuth

from .. import __version__
from .request_builder import check_header_value


DEFAULT_USER_AGENT = f"atlassian-client/{__version__}"


class HTTPBearerAuth(AuthBase):
    """Attaches an ``Authorization: Bearer <token>`` header"""

    def __init__(self, token: str):
        self.token = token

    def __eq__(self, other):
        return self.token == getattr(other, 'token', None)

    def __ne__(self, other):
        return not self == other

    def __call__(self, r):
        r.headers['Authorization'] = f'Bearer {self.token}'
        return r


class Authenticator:
    """
    Credential holder applied to every request of a client.

    Setters are not synchronized: configure credentials before the client is
    shared between threads.
    """

    def __init__(self):
        self._auth: Optional[AuthBase] = None
        self._scheme: Optional[str] = None
        self._user_agent: Optional[str] = None
        self.logger = logging.getLogger(__name__)

    @property
    def scheme(self) -> Optional[str]:
        """Active scheme: 'basic', 'bearer' or None"""
        return self._scheme

    @property
    def user_agent(self) -> str:
        return self._user_agent or DEFAULT_USER_AGENT

    def set_basic_auth(self, identity: str, secret: str):
        """Use HTTP Basic credentials, replacing any bearer token"""
        # bytes skip requests' latin-1 encoding so non-ASCII identities work
        self._auth = HTTPBasicAuth(identity.encode('utf-8'), secret.encode('utf-8'))
        self._scheme = 'basic'
        self.logger.debug("Basic authentication configured")

    def set_bearer_token(self, token: str):
        """Use a bearer token, replacing any basic credentials"""
        check_header_value('Authorization', token)
        self._auth = HTTPBearerAuth(token)
        self._scheme = 'bearer'
        self.logger.debug("Bearer authentication configured")

    def set_user_agent(self, value: str):
        """Override the User-Agent sent with every request"""
        check_header_value('User-Agent', value)
        self._user_agent = value

    def clear(self):
        """Drop credentials and the user-agent override"""
        self._auth = None
        self._scheme = None
        self._user_agent = None

    def apply(self, request):
        """
        Stamp credentials and user agent onto the request headers.

        Idempotent and free of I/O. Any Authorization header not produced by
        the active scheme is removed.
        """
        request.headers.pop('Authorization', None)
        if self._auth is not None:
            self._auth(request)
        request.headers['User-Agent'] = self.user_agent
        return request

"""
Pytest configuration and shared fixtures for the Atlassian client tests.

The stub transport is a requests adapter mounted on a real Session, so the
whole pipeline runs without network access.
"""

import io
import json
import threading
from typing import Any, Callable, Dict, List, Optional

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from atlassian_client.api.platforms import AdminClient, JiraClient
from atlassian_client.core.config_manager import ClientConfig
from tests.fixtures.sample_data import SITE


class StubAdapter(BaseAdapter):
    """
    Requests adapter that records every prepared request and replies with a
    canned response, a handler result, or an exception.
    """

    def __init__(
        self,
        status: int = 200,
        body: Any = b'',
        headers: Optional[Dict[str, str]] = None,
        handler: Optional[Callable] = None,
        error: Optional[Exception] = None
    ):
        super().__init__()
        self.status = status
        self.body = body
        self.headers = headers or {}
        self.handler = handler
        self.error = error
        self.requests: List[requests.PreparedRequest] = []
        self.timeouts: List[Any] = []
        self.release = threading.Event()
        self.block = False
        self.drained_bodies = 0

    def reply(self, status: int = 200, body: Any = b'', headers: Optional[Dict[str, str]] = None):
        self.status, self.body, self.headers = status, body, headers or {}

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.requests.append(request)
        self.timeouts.append(timeout)

        if self.block:
            self.release.wait(5)

        if self.error is not None:
            raise self.error

        if self.handler is not None:
            status, body, headers = self.handler(request)
        else:
            status, body, headers = self.status, self.body, self.headers

        if not isinstance(body, (bytes, bytearray)):
            body = json.dumps(body).encode('utf-8')

        response = requests.Response()
        response.status_code = status
        response.reason = 'OK' if status < 400 else 'Error'
        response.headers = CaseInsensitiveDict(headers)
        response.raw = _TrackedBody(bytes(body), self)
        response.url = request.url
        response.request = request
        return response

    def close(self):
        pass


class _TrackedBody(io.BytesIO):
    """Response body that counts how often it is read to the end"""

    def __init__(self, data: bytes, adapter: StubAdapter):
        super().__init__(data)
        self._adapter = adapter
        self._drained = False

    def read(self, size=-1):
        data = super().read(size)
        if not data and not self._drained:
            self._drained = True
            self._adapter.drained_bodies += 1
        return data


@pytest.fixture
def stub_adapter():
    """Stub transport; unblocks any waiting call on teardown"""
    adapter = StubAdapter()
    yield adapter
    adapter.release.set()


@pytest.fixture
def stub_session(stub_adapter):
    """Real requests session routed through the stub transport"""
    session = requests.Session()
    session.trust_env = False
    session.mount('https://', stub_adapter)
    session.mount('http://', stub_adapter)
    yield session
    session.close()


@pytest.fixture
def client_config():
    return ClientConfig(timeout=5)


@pytest.fixture
def jira_client(stub_session, client_config):
    """Jira client on the stub transport with basic credentials"""
    client = JiraClient(SITE, session=stub_session, config=client_config)
    client.auth.set_basic_auth("user@x.com", "tok")
    return client


@pytest.fixture
def admin_client(stub_session, client_config):
    """Admin client on the stub transport with a bearer token"""
    client = AdminClient(session=stub_session, config=client_config)
    client.auth.set_bearer_token("admin-token")
    return client

"""
Core HTTP Client for the Atlassian API

Owns the site URL, the transport session and the authenticator, and runs
every call through resolve, build, authenticate and send. Calls are
executed exactly once; status codes are reported, never judged.
"""

import atexit
import logging
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Dict, Optional

import requests
from requests.exceptions import (
    InvalidSchema, InvalidURL as RequestsInvalidURL, MissingSchema,
    RequestException, Timeout
)

from ..core.config_manager import ClientConfig
from ..core.error_handler import (
    DeadlineExceeded, EncodingError, InvalidURL, TransportFailure
)
from . import endpoint_resolver
from .authentication import Authenticator
from .context import Context
from .request_builder import Request, RequestBuilder, check_header_value
from .response_handler import Response


_executor = ThreadPoolExecutor(max_workers=32, thread_name_prefix='atlassian-client')
atexit.register(_executor.shutdown, wait=False)


def _headers_only(prepared):
    """Authorization comes from the authenticator, never from netrc or session.auth"""
    return prepared


class Client:
    """
    Shared request pipeline for every Atlassian service.

    Features:
    - URL resolution against the configured site
    - JSON request bodies and pluggable authentication
    - Single-shot execution on an injected ``requests.Session``
    - Context-driven cancellation and deadlines
    - Normalized responses for every received status

    The site, session and configuration are read-only after construction,
    so one client can serve concurrent calls. Credential changes through
    ``auth`` must happen before the client is shared.
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        config: Optional[ClientConfig] = None
    ):
        """
        Initialize the client

        Args:
            base_url: Site URL every relative path is resolved against
            session: Transport to use; a new session is created when omitted
            config: Transport settings (timeout, redirects, TLS, proxies)
        """
        self.base_url = endpoint_resolver.validate_base_url(base_url)
        self.config = config or ClientConfig()
        self.auth = Authenticator()
        self.request_builder = RequestBuilder()
        self.logger = logging.getLogger(__name__)

        self._owns_session = session is None
        self.session = session if session is not None else self._create_session()

        if self.config.user_agent:
            self.auth.set_user_agent(self.config.user_agent)

    @classmethod
    def from_config(cls, config: ClientConfig, session: Optional[requests.Session] = None, **kwargs) -> 'Client':
        """Create a client from configuration and apply its credentials"""
        if not config.base_url:
            raise InvalidURL("configuration has no base_url")

        client = cls(config.base_url, session=session, config=config, **kwargs)
        client.apply_auth_config(config)
        return client

    def apply_auth_config(self, config: ClientConfig):
        """Copy the credentials of ``config.auth`` onto the authenticator"""
        auth = config.auth
        if auth.method == 'basic':
            password = auth.password.get_secret_value() if auth.password else ''
            self.auth.set_basic_auth(auth.username or '', password)
        elif auth.method == 'bearer':
            self.auth.set_bearer_token(auth.token.get_secret_value() if auth.token else '')

    def _create_session(self) -> requests.Session:
        """Session used when the caller does not inject one"""
        session = requests.Session()
        session.verify = self.config.verify_ssl
        session.max_redirects = self.config.max_redirects
        if self.config.proxies:
            session.proxies.update(self.config.proxies)
        return session

    def resolve(self, path: str) -> str:
        """Absolute URL of a path relative to the site"""
        return endpoint_resolver.resolve(self.base_url, path)

    def new_request(self, ctx: Context, method: str, path: str, payload: Any = None) -> Request:
        """Resolve ``path`` and build a request for it"""
        url = self.resolve(path)
        return self.request_builder.build(ctx, method, url, payload)

    def call(
        self,
        ctx: Context,
        method: str,
        path: str,
        payload: Any = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Response:
        """
        Resolve, build and execute a call in one step

        Args:
            ctx: Cancellation/deadline context
            method: HTTP method
            path: Path relative to the site, optionally with a query
            payload: Request body, see ``RequestBuilder.build``
            headers: Extra headers such as Accept

        Returns:
            Normalized response for any received status
        """
        request = self.new_request(ctx, method, path, payload)
        if headers:
            for name, value in headers.items():
                check_header_value(name, value)
            request.headers.update(headers)
        return self.do(request)

    def do(self, request: Request) -> Response:
        """
        Execute a request exactly once

        The transport runs on a worker thread while the caller waits for
        either the reply or the end of the request's context, whichever
        comes first.

        Returns:
            Normalized response, including 4xx and 5xx replies

        Raises:
            Cancelled, DeadlineExceeded: If the context ends first
            TransportFailure: If no HTTP reply was received
            InvalidURL: If the transport rejects the URL
            EncodingError: If a header value cannot be sent
        """
        ctx = request.context
        ended = ctx.err()
        if ended is not None:
            raise ended

        self.auth.apply(request)

        timeout = self.config.timeout
        remaining = ctx.remaining()
        if remaining is not None:
            # urllib3 rejects non-positive timeouts
            timeout = max(min(timeout, remaining), 0.001)

        self.logger.debug(f"Sending {request!r} (timeout {timeout:.2f}s)")
        start_time = time.monotonic()

        finished = threading.Event()
        future: Future = _executor.submit(self._send, request, timeout)
        future.add_done_callback(lambda _: finished.set())
        unregister = ctx.on_done(finished.set)
        try:
            finished.wait(ctx.remaining())
        finally:
            unregister()

        if not future.done():
            # The worker drains and closes the late reply on its own
            future.cancel()
            raise ctx.err() or DeadlineExceeded()

        response = future.result()
        self.logger.debug(
            f"Completed {response!r} in {time.monotonic() - start_time:.2f}s"
        )
        return response

    def _send(self, request: Request, timeout: float) -> Response:
        """Transport step, run on a worker thread"""
        try:
            prepared = self.session.prepare_request(requests.Request(
                method=request.method,
                url=request.url,
                headers=dict(request.headers),
                data=request.body,
                auth=_headers_only
            ))
            settings = self.session.merge_environment_settings(
                prepared.url, {}, None, None, None
            )
            settings['stream'] = False

            raw = self.session.send(
                prepared,
                timeout=timeout,
                allow_redirects=self.config.allow_redirects,
                **settings
            )
            with raw:
                body = raw.content
        except (MissingSchema, InvalidSchema, RequestsInvalidURL) as e:
            raise InvalidURL(f"Transport rejected URL {request.url}: {e}") from e
        except Timeout as e:
            if request.context.done():
                raise DeadlineExceeded() from e
            raise TransportFailure(f"{request.method} {request.url} timed out: {e}", e) from e
        except RequestException as e:
            raise TransportFailure(f"{request.method} {request.url} failed: {e}", e) from e
        except UnicodeEncodeError as e:
            raise EncodingError(f"{request.method} {request.url} has a header http.client cannot encode") from e

        return Response(
            status_code=raw.status_code,
            body=body or b'',
            endpoint=raw.url or prepared.url,
            headers=raw.headers,
            method=request.method,
            reason=raw.reason
        )

    def close(self):
        """Close the session if this client created it"""
        if self._owns_session and self.session is not None:
            self.session.close()
            self.logger.debug("HTTP client session closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

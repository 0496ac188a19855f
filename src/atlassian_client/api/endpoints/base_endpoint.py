"""
Base Endpoint Class for the Atlassian API Client

Common plumbing shared by every service: parameter validation, path and
query assembly, status classification and JSON decoding on top of the core
Client.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple, Type, TypeVar
from urllib.parse import quote, urlencode

from ...core.error_handler import ParameterError
from ..client import Client
from ..context import Context
from ..response_handler import Response, decode_json, raise_for_status


T = TypeVar('T')

JSON_HEADERS = {'Accept': 'application/json'}


class BaseEndpoint:
    """
    Base class for Atlassian service endpoints.

    Holds a non-owning reference to the shared Client. Subclasses describe
    one remote resource each and implement their operations with the
    helpers below.
    """

    base_path = ''

    def __init__(self, client: Client):
        """
        Initialize endpoint with the shared client

        Args:
            client: Configured Client instance
        """
        self.client = client
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def _build_endpoint(self, path: str = '', params: Optional[Iterable[Tuple[str, Any]]] = None, **path_params) -> str:
        """
        Build a relative endpoint path

        Args:
            path: Path below ``base_path``, may contain ``{name}`` placeholders
            params: Query parameters as (key, value) pairs, order preserved
            **path_params: Placeholder values, percent-encoded as path segments

        Returns:
            Relative path with optional query string
        """
        endpoint = self.base_path
        if path:
            endpoint = endpoint.rstrip('/') + '/' + path.lstrip('/') if endpoint else path

        if path_params:
            endpoint = endpoint.format(**{
                key: quote(str(value), safe='') for key, value in path_params.items()
            })

        query = [(key, value) for key, value in (params or []) if value is not None]
        if query:
            endpoint = f"{endpoint}?{urlencode(query)}"

        return endpoint

    def _validate_required_params(self, **params):
        """
        Validate that required parameters are present and non-empty

        Raises:
            ParameterError: Naming the first missing parameter
        """
        for name, value in params.items():
            if value is None or (isinstance(value, (str, list, tuple, dict)) and len(value) == 0):
                raise ParameterError(f"please provide a valid {name} value")

    def _request(
        self,
        ctx: Context,
        method: str,
        endpoint: str,
        payload: Any = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Response:
        """Execute a call and classify its status"""
        response = self.client.call(ctx, method, endpoint, payload, headers=headers or JSON_HEADERS)
        self._log_operation(method, endpoint=endpoint, status=response.status_code)
        return raise_for_status(response)

    def _fetch(
        self,
        ctx: Context,
        method: str,
        endpoint: str,
        model: Type[T],
        payload: Any = None
    ) -> Tuple[T, Response]:
        """Execute a call and decode its body into ``model``"""
        response = self._request(ctx, method, endpoint, payload)
        return decode_json(response, model), response

    def _log_operation(self, operation: str, **context):
        """Log a completed operation at debug level"""
        details = ', '.join(f"{k}={v}" for k, v in context.items())
        self.logger.debug(f"{self.__class__.__name__} {operation} ({details})")

    @staticmethod
    def _join(values: Optional[List[str]]) -> Optional[str]:
        """Comma-join list parameters, None when empty"""
        if not values:
            return None
        return ','.join(str(v) for v in values)

"""
Screen Scheme Endpoints for the Jira Cloud API

Lists, creates, updates and deletes screen schemes. Only schemes used in
classic projects are visible through these operations.
"""

from typing import List, Optional, Tuple

from ...core.error_handler import ParameterError
from ..context import Context
from ..models import ScreenSchemePageScheme, ScreenSchemePayloadScheme, ScreenSchemeScheme
from ..response_handler import Response
from .base_endpoint import BaseEndpoint


class ScreenSchemeEndpoints(BaseEndpoint):
    """Screen schemes: ``rest/api/3/screenscheme``"""

    base_path = 'rest/api/3/screenscheme'

    def gets(
        self,
        ctx: Context,
        ids: Optional[List[int]] = None,
        start_at: int = 0,
        max_results: int = 50
    ) -> Tuple[ScreenSchemePageScheme, Response]:
        """
        Return a page of screen schemes

        Args:
            ctx: Call context
            ids: Restrict the page to these scheme ids
            start_at: Index of the first item
            max_results: Page size

        Returns:
            The page and the raw response
        """
        params = [('startAt', start_at), ('maxResults', max_results)]
        params.extend(('id', scheme_id) for scheme_id in ids or [])

        endpoint = self._build_endpoint(params=params)
        return self._fetch(ctx, 'GET', endpoint, ScreenSchemePageScheme)

    def create(self, ctx: Context, payload: ScreenSchemePayloadScheme) -> Tuple[ScreenSchemeScheme, Response]:
        """Create a screen scheme"""
        self._check_payload(payload)
        return self._fetch(ctx, 'POST', self._build_endpoint(), ScreenSchemeScheme, payload)

    def update(self, ctx: Context, scheme_id: str, payload: ScreenSchemePayloadScheme) -> Response:
        """Update a screen scheme"""
        self._validate_required_params(scheme_id=str(scheme_id) if scheme_id is not None else None)
        self._check_payload(payload)
        endpoint = self._build_endpoint('{scheme_id}', scheme_id=scheme_id)
        return self._request(ctx, 'PUT', endpoint, payload)

    def delete(self, ctx: Context, scheme_id: str) -> Response:
        """Delete a screen scheme that no issue type screen scheme uses"""
        self._validate_required_params(scheme_id=str(scheme_id) if scheme_id is not None else None)
        endpoint = self._build_endpoint('{scheme_id}', scheme_id=scheme_id)
        return self._request(ctx, 'DELETE', endpoint)

    @staticmethod
    def _check_payload(payload):
        if payload is None:
            raise ParameterError("please provide a valid ScreenSchemePayloadScheme value")
        if not isinstance(payload, ScreenSchemePayloadScheme):
            raise ParameterError(
                f"payload must be a ScreenSchemePayloadScheme, got {type(payload).__name__}"
            )

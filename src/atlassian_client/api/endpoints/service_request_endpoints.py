"""
Customer Request Endpoints for the Jira Service Management API
"""

from typing import List, Optional, Tuple

from ..context import Context
from ..models import CustomerRequestScheme
from ..response_handler import Response
from .base_endpoint import BaseEndpoint


class ServiceRequestEndpoints(BaseEndpoint):
    """Customer requests: ``rest/servicedeskapi/request``"""

    base_path = 'rest/servicedeskapi/request'

    def get(
        self,
        ctx: Context,
        issue_key: str,
        expand: Optional[List[str]] = None
    ) -> Tuple[CustomerRequestScheme, Response]:
        """
        Return a customer request

        Args:
            ctx: Call context
            issue_key: Request issue key or id
            expand: Optional expansions such as ``serviceDesk`` or ``requestType``
        """
        self._validate_required_params(issue_key=issue_key)
        endpoint = self._build_endpoint(
            '{issue_key}',
            params=[('expand', self._join(expand))],
            issue_key=issue_key
        )
        return self._fetch(ctx, 'GET', endpoint, CustomerRequestScheme)

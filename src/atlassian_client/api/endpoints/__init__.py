"""
Atlassian API Endpoint Modules

Resource-specific operations built on the shared Client pipeline.
"""

from .base_endpoint import BaseEndpoint
from .admin_user_endpoints import AdminUserEndpoints
from .issue_vote_endpoints import IssueVoteEndpoints
from .screen_scheme_endpoints import ScreenSchemeEndpoints
from .service_request_endpoints import ServiceRequestEndpoints

__all__ = [
    'BaseEndpoint',
    'AdminUserEndpoints',
    'IssueVoteEndpoints',
    'ScreenSchemeEndpoints',
    'ServiceRequestEndpoints'
]

"""
Platform Clients for Jira and Atlassian Admin

Each platform client is a core Client with its services attached. Services
keep a reference to the client and share its session and authenticator.
"""

from typing import Optional

import requests

from ..core.config_manager import ClientConfig
from .client import Client
from .endpoints.admin_user_endpoints import AdminUserEndpoints
from .endpoints.issue_vote_endpoints import IssueVoteEndpoints
from .endpoints.screen_scheme_endpoints import ScreenSchemeEndpoints
from .endpoints.service_request_endpoints import ServiceRequestEndpoints


ADMIN_SITE = "https://api.atlassian.com/admin/"


class IssueServices:
    def __init__(self, client: Client):
        self.vote = IssueVoteEndpoints(client)


class ServiceManagementServices:
    def __init__(self, client: Client):
        self.request = ServiceRequestEndpoints(client)


class JiraClient(Client):
    """
    Jira Cloud client for a single site.

    Usage::

        jira = JiraClient("https://example.atlassian.net")
        jira.auth.set_basic_auth("user@example.com", api_token)
        votes, response = jira.issue.vote.gets(Context.background(), "KP-1")
    """

    def __init__(self, site: str, session: Optional[requests.Session] = None, config: Optional[ClientConfig] = None):
        super().__init__(site, session=session, config=config)
        self.issue = IssueServices(self)
        self.screen_scheme = ScreenSchemeEndpoints(self)
        self.service_management = ServiceManagementServices(self)


class AdminClient(Client):
    """Atlassian organization administration client"""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        site: str = ADMIN_SITE,
        config: Optional[ClientConfig] = None
    ):
        super().__init__(site, session=session, config=config)
        self.user = AdminUserEndpoints(self)

    @classmethod
    def from_config(cls, config: ClientConfig, session: Optional[requests.Session] = None, **kwargs) -> 'AdminClient':
        """Create an admin client, falling back to the public admin site"""
        client = cls(session=session, site=config.base_url or ADMIN_SITE, config=config, **kwargs)
        client.apply_auth_config(config)
        return client

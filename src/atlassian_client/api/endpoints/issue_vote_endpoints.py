"""
Issue Vote Endpoints for the Jira Cloud API

Reads, adds and removes the current user's vote on an issue.
"""

from typing import Tuple

from ..context import Context
from ..models import IssueVoteScheme
from ..response_handler import Response
from .base_endpoint import BaseEndpoint


class IssueVoteEndpoints(BaseEndpoint):
    """Votes on a single issue: ``rest/api/3/issue/{key}/votes``"""

    base_path = 'rest/api/3/issue/{issue_key}/votes'

    def gets(self, ctx: Context, issue_key: str) -> Tuple[IssueVoteScheme, Response]:
        """
        Return details about the votes on an issue

        Args:
            ctx: Call context
            issue_key: Issue key or numeric id

        Returns:
            Vote summary and the raw response
        """
        self._validate_required_params(issue_key=issue_key)
        endpoint = self._build_endpoint(issue_key=issue_key)
        return self._fetch(ctx, 'GET', endpoint, IssueVoteScheme)

    def add(self, ctx: Context, issue_key: str) -> Response:
        """Add the user's vote, the equivalent of clicking Vote on the issue"""
        self._validate_required_params(issue_key=issue_key)
        return self._request(ctx, 'POST', self._build_endpoint(issue_key=issue_key))

    def delete(self, ctx: Context, issue_key: str) -> Response:
        """Remove the user's vote from an issue"""
        self._validate_required_params(issue_key=issue_key)
        return self._request(ctx, 'DELETE', self._build_endpoint(issue_key=issue_key))

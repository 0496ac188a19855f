"""
User Management Endpoints for the Atlassian Admin API

Manages the profiles and lifecycle of accounts owned by an
organization.
"""

from typing import Any, Dict, List, Optional, Tuple

from ..context import Context
from ..models import AdminUserScheme, LifecycleDisablePayloadScheme, UserPermissionScheme
from ..response_handler import Response
from .base_endpoint import BaseEndpoint


class AdminUserEndpoints(BaseEndpoint):
    """Managed accounts: ``users/{account_id}/manage``"""

    base_path = 'users/{account_id}/manage'

    def permissions(
        self,
        ctx: Context,
        account_id: str,
        privileges: Optional[List[str]] = None
    ) -> Tuple[UserPermissionScheme, Response]:
        """
        Return the permissions you hold for managing an account

        Args:
            ctx: Call context
            account_id: Account to manage
            privileges: Limit the result to these privileges
        """
        self._validate_required_params(account_id=account_id)
        endpoint = self._build_endpoint(
            params=[('privileges', self._join(privileges))],
            account_id=account_id
        )
        return self._fetch(ctx, 'GET', endpoint, UserPermissionScheme)

    def get(self, ctx: Context, account_id: str) -> Tuple[AdminUserScheme, Response]:
        """Return the profile of a managed account"""
        self._validate_required_params(account_id=account_id)
        endpoint = self._build_endpoint('profile', account_id=account_id)
        return self._fetch(ctx, 'GET', endpoint, AdminUserScheme)

    def update(self, ctx: Context, account_id: str, payload: Dict[str, Any]) -> Tuple[AdminUserScheme, Response]:
        """
        Update fields of a managed account profile

        The profile.write privilege reported by ``permissions`` lists the
        fields that can change.

        Args:
            ctx: Call context
            account_id: Account to manage
            payload: Profile fields to set, such as ``{"nickname": "mia"}``
        """
        self._validate_required_params(account_id=account_id, payload=payload)
        endpoint = self._build_endpoint('profile', account_id=account_id)
        return self._fetch(ctx, 'PATCH', endpoint, AdminUserScheme, payload)

    def enable(self, ctx: Context, account_id: str) -> Response:
        """Re-enable a deactivated account"""
        self._validate_required_params(account_id=account_id)
        endpoint = self._build_endpoint('lifecycle/enable', account_id=account_id)
        return self._request(ctx, 'POST', endpoint)

    def disable(self, ctx: Context, account_id: str, message: Optional[str] = None) -> Response:
        """
        Deactivate an account

        Args:
            ctx: Call context
            account_id: Account to deactivate
            message: Optional reason sent to the account owner
        """
        self._validate_required_params(account_id=account_id)
        endpoint = self._build_endpoint('lifecycle/disable', account_id=account_id)
        payload = LifecycleDisablePayloadScheme(message=message) if message else None
        return self._request(ctx, 'POST', endpoint, payload)

"""
Payload and result models of the bundled Atlassian services

Only the fields the bundled operations need are modeled; unknown fields in
responses are ignored.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class JiraModel(BaseModel):
    """Jira payloads use camelCase keys"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserScheme(JiraModel):
    self_url: Optional[str] = Field(default=None, alias='self')
    account_id: Optional[str] = None
    account_type: Optional[str] = None
    email_address: Optional[str] = None
    display_name: Optional[str] = None
    active: Optional[bool] = None
    time_zone: Optional[str] = None


class IssueVoteScheme(JiraModel):
    self_url: Optional[str] = Field(default=None, alias='self')
    votes: int = 0
    has_voted: bool = False
    voters: List[UserScheme] = Field(default_factory=list)


class ScreenTypesScheme(JiraModel):
    """Screen ids per issue operation; default is required by Jira"""
    default: int
    create: Optional[int] = None
    view: Optional[int] = None
    edit: Optional[int] = None


class ScreenSchemeScheme(JiraModel):
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    screens: Optional[ScreenTypesScheme] = None


class ScreenSchemePageScheme(JiraModel):
    self_url: Optional[str] = Field(default=None, alias='self')
    next_page: Optional[str] = None
    max_results: int = 0
    start_at: int = 0
    total: int = 0
    is_last: bool = False
    values: List[ScreenSchemeScheme] = Field(default_factory=list)


class ScreenSchemePayloadScheme(JiraModel):
    name: str = Field(min_length=1)
    screens: ScreenTypesScheme
    description: Optional[str] = None


class RequestStatusScheme(JiraModel):
    status: Optional[str] = None
    status_category: Optional[str] = None


class CustomerRequestScheme(JiraModel):
    issue_id: Optional[str] = None
    issue_key: Optional[str] = None
    request_type_id: Optional[str] = None
    service_desk_id: Optional[str] = None
    reporter: Optional[UserScheme] = None
    current_status: Optional[RequestStatusScheme] = None
    request_field_values: List[Dict[str, Any]] = Field(default_factory=list)
    links: Dict[str, Any] = Field(default_factory=dict, alias='_links')


class AdminAccountScheme(BaseModel):
    account_id: str
    name: Optional[str] = None
    nickname: Optional[str] = None
    zoneinfo: Optional[str] = None
    locale: Optional[str] = None
    email: Optional[str] = None
    picture: Optional[str] = None
    account_type: Optional[str] = None
    account_status: Optional[str] = None
    email_verified: Optional[bool] = None
    extended_profile: Dict[str, Any] = Field(default_factory=dict)


class AdminUserScheme(BaseModel):
    account: AdminAccountScheme


class PermissionReasonScheme(BaseModel):
    key: Optional[str] = None


class PermissionGrantScheme(BaseModel):
    allowed: bool = False
    reason: Optional[PermissionReasonScheme] = None


class UserPermissionScheme(BaseModel):
    """Management permissions over an account, keyed as the API reports them"""
    model_config = ConfigDict(populate_by_name=True)

    email_set: Optional[PermissionGrantScheme] = Field(default=None, alias='email.set')
    lifecycle_enablement: Optional[PermissionGrantScheme] = Field(default=None, alias='lifecycle.enablement')
    profile: Dict[str, PermissionGrantScheme] = Field(default_factory=dict)
    profile_write: Dict[str, PermissionGrantScheme] = Field(default_factory=dict, alias='profile.write')
    api_token_read: Optional[PermissionGrantScheme] = Field(default=None, alias='apiToken.read')
    api_token_delete: Optional[PermissionGrantScheme] = Field(default=None, alias='apiToken.delete')


class LifecycleDisablePayloadScheme(BaseModel):
    message: Optional[str] = None

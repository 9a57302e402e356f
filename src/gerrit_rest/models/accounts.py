from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .base import GerritModel, QueryOptions, StrList, Timestamp


class AvatarInfo(GerritModel):
    url: str
    height: Optional[int] = None
    width: Optional[int] = None


class AccountInfo(GerritModel):
    account_id: Optional[int] = Field(default=None, alias="_account_id")
    name: Optional[str] = None
    display_name: Optional[str] = None
    email: Optional[str] = None
    secondary_emails: Optional[List[str]] = None
    username: Optional[str] = None
    avatars: Optional[List[AvatarInfo]] = None
    more_accounts: Optional[bool] = Field(default=None, alias="_more_accounts")
    status: Optional[str] = None
    inactive: Optional[bool] = None
    tags: Optional[List[str]] = None


class AccountDetailInfo(AccountInfo):
    registered_on: Optional[Timestamp] = None


class EmailInfo(GerritModel):
    email: str
    preferred: Optional[bool] = None
    pending_confirmation: Optional[bool] = None


class SSHKeyInfo(GerritModel):
    seq: int
    ssh_public_key: str
    encoded_key: Optional[str] = None
    algorithm: Optional[str] = None
    comment: Optional[str] = None
    valid: bool = False


class QueryLimitInfo(GerritModel):
    min: int
    max: int


class AccountCapabilityInfo(GerritModel):
    access_database: Optional[bool] = Field(default=None, alias="accessDatabase")
    administrate_server: Optional[bool] = Field(
        default=None, alias="administrateServer"
    )
    create_account: Optional[bool] = Field(default=None, alias="createAccount")
    create_group: Optional[bool] = Field(default=None, alias="createGroup")
    create_project: Optional[bool] = Field(default=None, alias="createProject")
    email_reviewers: Optional[bool] = Field(default=None, alias="emailReviewers")
    flush_caches: Optional[bool] = Field(default=None, alias="flushCaches")
    kill_task: Optional[bool] = Field(default=None, alias="killTask")
    maintain_server: Optional[bool] = Field(default=None, alias="maintainServer")
    priority: Optional[str] = None
    query_limit: Optional[QueryLimitInfo] = Field(default=None, alias="queryLimit")
    run_gc: Optional[bool] = Field(default=None, alias="runGC")
    stream_events: Optional[bool] = Field(default=None, alias="streamEvents")
    view_all_accounts: Optional[bool] = Field(default=None, alias="viewAllAccounts")
    view_caches: Optional[bool] = Field(default=None, alias="viewCaches")
    view_connections: Optional[bool] = Field(default=None, alias="viewConnections")
    view_plugins: Optional[bool] = Field(default=None, alias="viewPlugins")
    view_queue: Optional[bool] = Field(default=None, alias="viewQueue")


class QueryAccountOptions(QueryOptions):
    skip: Optional[int] = Field(default=None, alias="S")
    additional_fields: Optional[StrList] = Field(default=None, alias="o")


class CapabilityOptions(GerritModel):
    """Restrict the capability check to the named capabilities."""

    filter: Optional[StrList] = Field(default=None, alias="q")


__all__ = [
    "AccountCapabilityInfo",
    "AccountDetailInfo",
    "AccountInfo",
    "AvatarInfo",
    "CapabilityOptions",
    "EmailInfo",
    "QueryAccountOptions",
    "QueryLimitInfo",
    "SSHKeyInfo",
]

from __future__ import annotations

from typing import Dict, List, Optional

from gerrit_rest.core.client import GerritClient
from gerrit_rest.core.urls import expand_path
from gerrit_rest.models.accounts import AccountInfo
from gerrit_rest.models.groups import (
    GroupInfo,
    GroupInput,
    ListGroupMembersOptions,
    ListGroupsOptions,
)


async def list_groups(
    client: GerritClient, options: Optional[ListGroupsOptions] = None
) -> Dict[str, GroupInfo]:
    """Visible groups keyed by group name."""
    return await client.get("groups/", options=options, result=Dict[str, GroupInfo])


async def get_group(client: GerritClient, group_id: str) -> GroupInfo:
    return await client.get(expand_path("groups/{}", group_id), result=GroupInfo)


async def get_group_detail(client: GerritClient, group_id: str) -> GroupInfo:
    """Group with its direct members and included groups."""
    return await client.get(
        expand_path("groups/{}/detail", group_id), result=GroupInfo
    )


async def create_group(
    client: GerritClient, group_name: str, group: Optional[GroupInput] = None
) -> GroupInfo:
    return await client.put(
        expand_path("groups/{}", group_name), group, result=GroupInfo
    )


async def list_group_members(
    client: GerritClient,
    group_id: str,
    options: Optional[ListGroupMembersOptions] = None,
) -> List[AccountInfo]:
    return await client.get(
        expand_path("groups/{}/members/", group_id),
        options=options,
        result=List[AccountInfo],
    )


async def get_group_member(
    client: GerritClient, group_id: str, account_id: str
) -> AccountInfo:
    return await client.get(
        expand_path("groups/{}/members/{}", group_id, account_id), result=AccountInfo
    )


async def add_group_member(
    client: GerritClient, group_id: str, account_id: str
) -> AccountInfo:
    return await client.put(
        expand_path("groups/{}/members/{}", group_id, account_id), result=AccountInfo
    )


async def delete_group_member(
    client: GerritClient, group_id: str, account_id: str
) -> None:
    await client.delete(expand_path("groups/{}/members/{}", group_id, account_id))


async def list_included_groups(
    client: GerritClient, group_id: str
) -> List[GroupInfo]:
    return await client.get(
        expand_path("groups/{}/groups/", group_id), result=List[GroupInfo]
    )


async def get_included_group(
    client: GerritClient, group_id: str, include_group_id: str
) -> GroupInfo:
    return await client.get(
        expand_path("groups/{}/groups/{}", group_id, include_group_id),
        result=GroupInfo,
    )

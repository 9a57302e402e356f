from __future__ import annotations

from typing import List, Optional

from gerrit_rest.core.client import GerritClient
from gerrit_rest.core.urls import expand_path
from gerrit_rest.models.accounts import (
    AccountCapabilityInfo,
    AccountDetailInfo,
    AccountInfo,
    CapabilityOptions,
    EmailInfo,
    QueryAccountOptions,
    SSHKeyInfo,
)
from gerrit_rest.models.groups import GroupInfo


async def query_accounts(
    client: GerritClient, options: QueryAccountOptions
) -> List[AccountInfo]:
    """
    Search accounts, e.g. ``QueryAccountOptions(query="name:John email:example.com")``.
    The last entry carries ``more_accounts`` when the result was truncated.
    """
    return await client.get("accounts/", options=options, result=List[AccountInfo])


async def get_account(client: GerritClient, account_id: str) -> AccountInfo:
    """account_id may be a numeric id, username, email or ``self``."""
    return await client.get(expand_path("accounts/{}", account_id), result=AccountInfo)


async def get_account_details(
    client: GerritClient, account_id: str
) -> AccountDetailInfo:
    return await client.get(
        expand_path("accounts/{}/detail", account_id), result=AccountDetailInfo
    )


async def get_account_name(client: GerritClient, account_id: str) -> Optional[str]:
    return await client.get(expand_path("accounts/{}/name", account_id), result=str)


async def get_username(client: GerritClient, account_id: str) -> Optional[str]:
    return await client.get(
        expand_path("accounts/{}/username", account_id), result=str
    )


async def list_account_emails(
    client: GerritClient, account_id: str
) -> List[EmailInfo]:
    return await client.get(
        expand_path("accounts/{}/emails", account_id), result=List[EmailInfo]
    )


async def list_ssh_keys(client: GerritClient, account_id: str) -> List[SSHKeyInfo]:
    return await client.get(
        expand_path("accounts/{}/sshkeys", account_id), result=List[SSHKeyInfo]
    )


async def add_ssh_key(
    client: GerritClient, account_id: str, ssh_public_key: str
) -> SSHKeyInfo:
    """Upload a public key; Gerrit expects it as a text/plain body."""
    response = await client.call(
        "POST",
        expand_path("accounts/{}/sshkeys", account_id),
        text=ssh_public_key,
        result=SSHKeyInfo,
    )
    return response.value


async def delete_ssh_key(client: GerritClient, account_id: str, seq: int) -> None:
    await client.delete(expand_path("accounts/{}/sshkeys/{}", account_id, seq))


async def list_account_groups(
    client: GerritClient, account_id: str
) -> List[GroupInfo]:
    return await client.get(
        expand_path("accounts/{}/groups", account_id), result=List[GroupInfo]
    )


async def get_account_capabilities(
    client: GerritClient,
    account_id: str,
    options: Optional[CapabilityOptions] = None,
) -> AccountCapabilityInfo:
    return await client.get(
        expand_path("accounts/{}/capabilities", account_id),
        options=options,
        result=AccountCapabilityInfo,
    )

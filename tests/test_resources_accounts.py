import json

import pytest
import respx
from httpx import Response
from gerrit_rest.core.client import GerritClient
from gerrit_rest.core.errors import GerritNotFoundError
from gerrit_rest.models import (
    CapabilityOptions,
    GroupInput,
    ListGroupMembersOptions,
    QueryAccountOptions,
)
from gerrit_rest.resources import accounts, groups

BASE = "https://example.com"

SSH_KEY = (
    "ssh-rsa AAAAB3NzaC1yc2EAAAABIwAAAQEA0T...YImydZAw== john.doe@example.com"
)


@pytest.fixture
def client():
    return GerritClient(base_url=f"{BASE}/")


@pytest.mark.asyncio
@respx.mock
async def test_query_accounts(client):
    route = respx.get(f"{BASE}/accounts/").mock(
        return_value=Response(
            200,
            json=[
                {"_account_id": 1000096, "name": "John Doe"},
                {"_account_id": 1001439, "name": "John Smith", "_more_accounts": True},
            ],
        )
    )

    async with client:
        result = await accounts.query_accounts(
            client, QueryAccountOptions(query="name:John email:example.com", limit=2)
        )

    assert [a.account_id for a in result] == [1000096, 1001439]
    assert result[-1].more_accounts is True
    assert route.calls[0].request.url.raw_path == (
        b"/accounts/?n=2&q=name:John+email:example.com"
    )


@pytest.mark.asyncio
@respx.mock
async def test_get_account_details(client):
    respx.get(f"{BASE}/accounts/self/detail").mock(
        return_value=Response(
            200,
            json={
                "_account_id": 1000096,
                "name": "John Doe",
                "email": "john.doe@example.com",
                "username": "john",
                "registered_on": "2015-07-23 07:01:09.296000000",
            },
        )
    )

    async with client:
        account = await accounts.get_account_details(client, "self")

    assert account.username == "john"
    assert account.registered_on.year == 2015


@pytest.mark.asyncio
@respx.mock
async def test_get_account_unknown(client):
    respx.get(f"{BASE}/accounts/nobody").mock(
        return_value=Response(404, text="Not found: nobody")
    )

    async with client:
        with pytest.raises(GerritNotFoundError):
            await accounts.get_account(client, "nobody")


@pytest.mark.asyncio
@respx.mock
async def test_add_ssh_key_sends_plain_text(client):
    route = respx.post(f"{BASE}/accounts/self/sshkeys").mock(
        return_value=Response(
            201,
            json={
                "seq": 2,
                "ssh_public_key": SSH_KEY,
                "encoded_key": "AAAAB3NzaC1yc2EAAAABIwAAAQEA0T...YImydZAw==",
                "algorithm": "ssh-rsa",
                "comment": "john.doe@example.com",
                "valid": True,
            },
        )
    )

    async with client:
        key = await accounts.add_ssh_key(client, "self", SSH_KEY)

    assert key.seq == 2
    assert key.valid is True
    sent = route.calls[0].request
    assert sent.headers["Content-Type"] == "text/plain"
    assert sent.content == SSH_KEY.encode()


@pytest.mark.asyncio
@respx.mock
async def test_delete_ssh_key(client):
    route = respx.delete(f"{BASE}/accounts/self/sshkeys/2").mock(
        return_value=Response(204)
    )

    async with client:
        await accounts.delete_ssh_key(client, "self", 2)

    assert route.called


@pytest.mark.asyncio
@respx.mock
async def test_get_account_capabilities_filtered(client):
    route = respx.get(f"{BASE}/accounts/self/capabilities").mock(
        return_value=Response(
            200,
            json={
                "createAccount": True,
                "queryLimit": {"min": 0, "max": 500},
                "runGC": True,
            },
        )
    )

    async with client:
        caps = await accounts.get_account_capabilities(
            client, "self", CapabilityOptions(filter=["createAccount", "runGC"])
        )

    assert caps.create_account is True
    assert caps.run_gc is True
    assert caps.query_limit.max == 500
    assert route.calls[0].request.url.raw_path == (
        b"/accounts/self/capabilities?q=createAccount&q=runGC"
    )


@pytest.mark.asyncio
@respx.mock
async def test_create_group(client):
    route = respx.put(f"{BASE}/groups/MyProject-Committers").mock(
        return_value=Response(
            201,
            json={
                "id": "6a1e70e1a88782771a91808c8af9bbb7a9871389",
                "name": "MyProject-Committers",
                "group_id": 551,
                "owner": "MyProject-Committers",
                "created_on": "2013-02-01 09:59:32.126000000",
            },
        )
    )

    async with client:
        group = await groups.create_group(
            client,
            "MyProject-Committers",
            GroupInput(description="contains all committers for MyProject"),
        )

    assert group.group_id == 551
    assert json.loads(route.calls[0].request.content) == {
        "description": "contains all committers for MyProject"
    }


@pytest.mark.asyncio
@respx.mock
async def test_list_group_members_recursive(client):
    group_id = "834ec36dd5e0ed21a2ff5d7e2255da082d63bbd7"
    route = respx.get(f"{BASE}/groups/{group_id}/members/").mock(
        return_value=Response(
            200,
            json=[{"_account_id": 1000097, "name": "Jane Roe"}],
        )
    )

    async with client:
        members = await groups.list_group_members(
            client, group_id, ListGroupMembersOptions(recursive=True)
        )

    assert members[0].name == "Jane Roe"
    assert route.calls[0].request.url.query == b"recursive=true"

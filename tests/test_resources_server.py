import json
from pathlib import Path

import pytest
import respx
from httpx import Response
from gerrit_rest.core.client import GerritClient
from gerrit_rest.models import (
    InstallPluginInput,
    ListAccessRightsOptions,
    PluginOptions,
)
from gerrit_rest.resources import access, config, plugins

BASE = "https://example.com"


def load_fixture(name: str) -> dict:
    p = Path(__file__).parent / "fixtures" / name
    with open(p, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def client():
    return GerritClient(base_url=f"{BASE}/")


@pytest.mark.asyncio
@respx.mock
async def test_list_access_rights(client):
    route = respx.get(f"{BASE}/access/").mock(
        return_value=Response(200, json=load_fixture("project_access.json"))
    )

    async with client:
        rights = await access.list_access_rights(
            client, ListAccessRightsOptions(project="go")
        )

    assert rights["go"].inherits_from.id == "All-Projects"
    assert route.calls[0].request.url.raw_path == b"/access/?project=go"


@pytest.mark.asyncio
@respx.mock
async def test_list_plugins(client):
    route = respx.get(f"{BASE}/plugins/").mock(
        return_value=Response(
            200,
            content=(
                b")]}'\n"
                b'{"delete-project": '
                b'{"id": "delete-project", "version": "2.9-SNAPSHOT"},'
                b' "reviewnotes": {"id": "reviewnotes", "disabled": true}}'
            ),
        )
    )

    async with client:
        result = await plugins.list_plugins(client, PluginOptions(all=True))

    assert result["delete-project"].version == "2.9-SNAPSHOT"
    assert result["reviewnotes"].disabled is True
    assert route.calls[0].request.url.raw_path == b"/plugins/?all=true"


@pytest.mark.asyncio
@respx.mock
async def test_install_and_toggle_plugin(client):
    install = respx.put(f"{BASE}/plugins/delete-project.jar").mock(
        return_value=Response(201, json={"id": "delete-project", "version": "2.8"})
    )
    respx.post(f"{BASE}/plugins/delete-project/gerrit~disable").mock(
        return_value=Response(200, json={"id": "delete-project", "disabled": True})
    )
    respx.post(f"{BASE}/plugins/delete-project/gerrit~enable").mock(
        return_value=Response(200, json={"id": "delete-project"})
    )

    async with client:
        installed = await plugins.install_plugin(
            client,
            "delete-project.jar",
            InstallPluginInput(url="http://example.com/delete-project-2.8.jar"),
        )
        disabled = await plugins.disable_plugin(client, "delete-project")
        enabled = await plugins.enable_plugin(client, "delete-project")

    assert installed.version == "2.8"
    assert disabled.disabled is True
    assert enabled.disabled is None
    assert json.loads(install.calls[0].request.content) == {
        "url": "http://example.com/delete-project-2.8.jar"
    }


@pytest.mark.asyncio
@respx.mock
async def test_get_version(client):
    respx.get(f"{BASE}/config/server/version").mock(
        return_value=Response(200, content=b')]}\'\n"2.7"')
    )

    async with client:
        assert await config.get_version(client) == "2.7"


@pytest.mark.asyncio
@respx.mock
async def test_list_caches_and_flush(client):
    route = respx.get(f"{BASE}/config/server/caches/").mock(
        return_value=Response(
            200,
            json={
                "accounts": {
                    "type": "MEM",
                    "entries": {"mem": 4},
                    "average_get": "2.5ms",
                    "hit_ratio": {"mem": 94},
                }
            },
        )
    )
    flush = respx.post(f"{BASE}/config/server/caches/accounts/flush").mock(
        return_value=Response(200)
    )

    async with client:
        caches = await config.list_caches(client)
        await config.flush_cache(client, "accounts")

    assert caches["accounts"].entries.mem == 4
    assert caches["accounts"].hit_ratio.mem == 94
    assert route.calls[0].request.url.query == b""
    assert flush.called

import io
import logging
from typing import Any, Dict, List

import httpx
import pytest
import respx
from httpx import Response
from gerrit_rest.core.client import GerritClient, remove_magic_prefix_line
from gerrit_rest.core.errors import (
    GerritConfigurationError,
    GerritConflictError,
    GerritHTTPError,
    GerritModelValidationError,
    GerritNotFoundError,
    GerritParseError,
    GerritSerializationError,
    GerritTransportError,
)
from gerrit_rest.models import BranchInfo, ChangeInfo, ProjectInfo, ProjectOptions


def test_remove_magic_prefix_line():
    assert remove_magic_prefix_line(b")]}'\n{\"a\": 1}") == b'{"a": 1}'
    assert remove_magic_prefix_line(b")]}'\r\n[]") == b"[]"


def test_remove_magic_prefix_line_leaves_other_bodies():
    assert remove_magic_prefix_line(b'{"a": 1}') == b'{"a": 1}'
    assert remove_magic_prefix_line(b")]}'x\n{}") == b")]}'x\n{}"
    assert remove_magic_prefix_line(b")]}'") == b")]}'"
    assert remove_magic_prefix_line(b"") == b""


@pytest.mark.parametrize("base_url", ["", "   ", "example.com", "ftp://example.com"])
def test_constructor_rejects_unusable_base_url(base_url):
    with pytest.raises(GerritConfigurationError):
        GerritClient(base_url=base_url)


def test_constructor_adds_trailing_slash():
    client = GerritClient(base_url="https://example.com/gerrit")
    assert client.base_url == "https://example.com/gerrit/"
    assert client.build_url("projects/") == "https://example.com/gerrit/projects/"


@pytest.mark.asyncio
async def test_new_request_sets_headers_and_body():
    client = GerritClient(base_url="https://example.com/")
    async with client:
        request = await client.new_request(
            "post", "changes/", {"project": "go", "subject": "x"}
        )

    assert request.method == "POST"
    assert str(request.url) == "https://example.com/changes/"
    assert request.headers["Accept"] == "application/json"
    assert request.headers["Content-Type"] == "application/json"
    assert request.content == b'{"project": "go", "subject": "x"}'


@pytest.mark.asyncio
async def test_new_request_without_body_sends_nothing():
    client = GerritClient(base_url="https://example.com/")
    async with client:
        request = await client.new_request("GET", "changes/")
    assert request.content == b""


@pytest.mark.asyncio
async def test_new_request_text_body_is_plain_text():
    client = GerritClient(base_url="https://example.com/")
    async with client:
        request = await client.new_request(
            "POST", "accounts/self/sshkeys", text="ssh-rsa AAAA"
        )
    assert request.headers["Content-Type"] == "text/plain"
    assert request.content == b"ssh-rsa AAAA"


@pytest.mark.asyncio
async def test_unserializable_body_raises_before_sending():
    client = GerritClient(base_url="https://example.com/")
    async with client:
        with pytest.raises(GerritSerializationError):
            await client.post("changes/", {"bad": object()})


@pytest.mark.asyncio
async def test_get_strips_magic_prefix_and_decodes():
    async with respx.mock:
        route = respx.get("https://example.com/projects/").mock(
            return_value=Response(200, content=b')]}\'\n{"arch": {"id": "arch"}}')
        )

        client = GerritClient(base_url="https://example.com/")
        async with client:
            projects = await client.get(
                "projects/",
                options=ProjectOptions(limit=2, regex="(arch|benchmarks)"),
                result=Dict[str, ProjectInfo],
            )

        assert list(projects) == ["arch"]
        assert projects["arch"].id == "arch"
        sent = route.calls[0].request
        assert sent.url.raw_path == b"/projects/?n=2&r=%28arch%7Cbenchmarks%29"


@pytest.mark.asyncio
async def test_call_returns_response_with_value():
    async with respx.mock:
        respx.get("https://example.com/changes/").mock(
            return_value=Response(200, json=[{"id": "go~master~I1"}])
        )

        client = GerritClient(base_url="https://example.com/")
        async with client:
            response = await client.call("GET", "changes/", result=List[ChangeInfo])

        assert response.status_code == 200
        assert response.method == "GET"
        assert response.url == "https://example.com/changes/"
        assert response.value[0].id == "go~master~I1"


@pytest.mark.asyncio
async def test_escaped_project_name_reaches_server():
    async with respx.mock:
        route = respx.get(host="example.com").mock(
            return_value=Response(200, json={"id": "plugins%2Fdelete-project"})
        )

        client = GerritClient(base_url="https://example.com/")
        async with client:
            await client.get("projects/plugins%2Fdelete-project", result=ProjectInfo)

        raw_path = route.calls[0].request.url.raw_path
        assert raw_path == b"/projects/plugins%2Fdelete-project"


@pytest.mark.asyncio
async def test_empty_success_body_decodes_to_none():
    async with respx.mock:
        respx.get("https://example.com/changes/123/edit").mock(
            return_value=Response(204)
        )

        client = GerritClient(base_url="https://example.com/")
        async with client:
            value = await client.get("changes/123/edit", result=ChangeInfo)

        assert value is None


@pytest.mark.asyncio
async def test_result_none_skips_decoding():
    async with respx.mock:
        respx.post("https://example.com/config/server/caches/web_sessions/flush").mock(
            return_value=Response(200, text="not json at all")
        )

        client = GerritClient(base_url="https://example.com/")
        async with client:
            value = await client.post("config/server/caches/web_sessions/flush")

        assert value is None


@pytest.mark.asyncio
async def test_byte_sink_receives_raw_body():
    async with respx.mock:
        respx.get("https://example.com/changes/1/revisions/current/patch").mock(
            return_value=Response(200, content=b")]}'\nRnJvbSA=")
        )

        sink = io.BytesIO()
        client = GerritClient(base_url="https://example.com/")
        async with client:
            value = await client.get("changes/1/revisions/current/patch", result=sink)

        assert value is sink
        assert sink.getvalue() == b")]}'\nRnJvbSA="


@pytest.mark.asyncio
async def test_400_error_carries_url_status_and_response():
    async with respx.mock:
        respx.get("https://example.com/changes/").mock(
            return_value=Response(400, text="bad query")
        )

        client = GerritClient(base_url="https://example.com/")
        async with client:
            with pytest.raises(GerritHTTPError) as exc:
                await client.get("changes/", result=List[ChangeInfo])

    error = exc.value
    assert error.status_code == 400
    assert "https://example.com/changes/" in str(error)
    assert "400" in str(error)
    assert error.detail == "bad query"
    assert error.response is not None
    assert error.response.status_code == 400


@pytest.mark.asyncio
async def test_404_raises_not_found():
    async with respx.mock:
        respx.get("https://example.com/projects/nope").mock(
            return_value=Response(404, text="Not found: nope")
        )

        client = GerritClient(base_url="https://example.com/")
        async with client:
            with pytest.raises(GerritNotFoundError) as exc:
                await client.get("projects/nope", result=ProjectInfo)

    assert exc.value.status_code == 404
    assert "Not found: nope" in str(exc.value)


@pytest.mark.asyncio
async def test_409_keeps_detail_and_json():
    async with respx.mock:
        respx.post("https://example.com/changes/1/submit").mock(
            return_value=Response(409, json={"message": "change is closed"})
        )

        client = GerritClient(base_url="https://example.com/")
        async with client:
            with pytest.raises(GerritConflictError) as exc:
                await client.post("changes/1/submit", result=ChangeInfo)

    assert exc.value.response_json == {"message": "change is closed"}
    assert "change is closed" in exc.value.detail


@pytest.mark.asyncio
async def test_malformed_json_raises_parse_error():
    async with respx.mock:
        respx.get("https://example.com/changes/").mock(
            return_value=Response(200, text="<html>maintenance</html>")
        )

        client = GerritClient(base_url="https://example.com/")
        async with client:
            with pytest.raises(GerritParseError) as exc:
                await client.get("changes/", result=List[ChangeInfo])

    assert "maintenance" in str(exc.value)
    assert exc.value.response.status_code == 200


@pytest.mark.asyncio
async def test_unexpected_shape_raises_model_validation_error():
    async with respx.mock:
        respx.get("https://example.com/projects/go/branches/master").mock(
            return_value=Response(200, json={"ref": 1})
        )

        client = GerritClient(base_url="https://example.com/")
        async with client:
            with pytest.raises(GerritModelValidationError):
                await client.get("projects/go/branches/master", result=BranchInfo)


@pytest.mark.asyncio
async def test_connect_error_raises_transport_error():
    async with respx.mock:
        respx.get("https://example.com/changes/").mock(side_effect=httpx.ConnectError)

        client = GerritClient(base_url="https://example.com/")
        async with client:
            with pytest.raises(GerritTransportError) as exc:
                await client.get("changes/", result=List[Any])

    assert exc.value.method == "GET"
    assert exc.value.url == "https://example.com/changes/"


@pytest.mark.asyncio
async def test_timeout_raises_transport_error():
    async with respx.mock:
        respx.get("https://example.com/changes/").mock(side_effect=httpx.ReadTimeout)

        client = GerritClient(base_url="https://example.com/")
        async with client:
            with pytest.raises(GerritTransportError) as exc:
                await client.get("changes/")

    assert "Timeout" in str(exc.value)


@pytest.mark.asyncio
async def test_redirect_loop_raises_transport_error():
    async with respx.mock:
        respx.get("https://example.com/loop").mock(
            return_value=Response(302, headers={"Location": "https://example.com/loop"})
        )

        client = GerritClient(base_url="https://example.com/", max_redirects=3)
        async with client:
            with pytest.raises(GerritTransportError):
                await client.get("loop")


@pytest.mark.asyncio
async def test_redirect_is_followed():
    async with respx.mock:
        respx.get("https://example.com/old/").mock(
            return_value=Response(301, headers={"Location": "https://example.com/new/"})
        )
        respx.get("https://example.com/new/").mock(
            return_value=Response(200, json="ok")
        )

        client = GerritClient(base_url="https://example.com/")
        async with client:
            assert await client.get("old/", result=str) == "ok"


@pytest.mark.asyncio
async def test_request_is_logged(caplog):
    async with respx.mock:
        respx.get("https://example.com/config/server/version").mock(
            return_value=Response(200, json="3.9.1")
        )

        client = GerritClient(base_url="https://example.com/")
        with caplog.at_level(logging.DEBUG, logger="gerrit_rest.client"):
            async with client:
                await client.get("config/server/version", result=str)

    record = next(r for r in caplog.records if r.getMessage() == "op.request")
    assert record.method == "GET"
    assert record.status == 200
    assert record.url == "https://example.com/config/server/version"
    assert record.duration_ms >= 0


@pytest.mark.asyncio
async def test_injected_http_client_is_not_closed():
    http = httpx.AsyncClient()
    client = GerritClient(base_url="https://example.com/", http=http)
    async with client:
        pass
    assert not http.is_closed
    await http.aclose()

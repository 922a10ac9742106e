"""Tests for AdminApiClient: candidate failover, working-URL caching, error mapping."""

import json

import httpx
import pytest

from app.infrastructure.external.admin_api import (
    UNREACHABLE_STATUS,
    AdminApiClient,
    AdminApiError,
)

UP = "http://up.test"
DOWN = "http://down.test"
ALSO_UP = "http://also-up.test"


class Recorder:
    """MockTransport handler: hosts in `down` refuse connections; others answer."""

    def __init__(self, down: set[str] | None = None, responses=None) -> None:
        self.down = down or set()
        self.responses = responses or {}
        self.calls: list[tuple[str, str]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        base = f"{request.url.scheme}://{request.url.host}"
        self.calls.append((request.method, str(request.url)))
        if base in self.down:
            raise httpx.ConnectError("connection refused", request=request)
        factory = self.responses.get(request.url.path)
        if factory is not None:
            return factory(request)
        return httpx.Response(200, json={"base": base, "path": request.url.path})


def _client(handler: Recorder, candidates: list[str]) -> AdminApiClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return AdminApiClient(candidates, http_client=http)


def test_empty_candidate_list_is_rejected() -> None:
    with pytest.raises(ValueError):
        AdminApiClient([])


async def test_first_reachable_candidate_answers() -> None:
    handler = Recorder(down={DOWN})
    client = _client(handler, [DOWN, UP, ALSO_UP])
    body = await client.get("/health")
    assert body == {"base": UP, "path": "/health"}
    assert client.working_base_url == UP
    assert [url for _, url in handler.calls] == [f"{DOWN}/health", f"{UP}/health"]


async def test_working_url_is_cached_for_later_calls() -> None:
    """After the first success only the cached base URL is tried."""
    handler = Recorder(down={DOWN})
    client = _client(handler, [DOWN, UP])
    await client.get("/health")
    handler.calls.clear()

    await client.get("/api/permit-rules")
    assert [url for _, url in handler.calls] == [f"{UP}/api/permit-rules"]


async def test_cached_url_failure_does_not_fall_back() -> None:
    """Once cached, a network failure on that URL is final (status 0)."""
    handler = Recorder(down={DOWN})
    client = _client(handler, [DOWN, UP, ALSO_UP])
    await client.get("/health")
    handler.down.add(UP)
    handler.calls.clear()

    with pytest.raises(AdminApiError) as exc_info:
        await client.get("/health")
    assert exc_info.value.status == UNREACHABLE_STATUS
    assert [url for _, url in handler.calls] == [f"{UP}/health"]
    assert client.working_base_url == UP


async def test_all_candidates_unreachable_raises_status_zero() -> None:
    handler = Recorder(down={DOWN, UP})
    client = _client(handler, [DOWN, UP])
    with pytest.raises(AdminApiError) as exc_info:
        await client.get("/api/permit-rules")
    err = exc_info.value
    assert err.status == 0
    assert err.endpoint == "/api/permit-rules"
    assert err.message.startswith("Network error:")
    assert client.working_base_url is None
    assert len(handler.calls) == 2


async def test_non_2xx_stops_failover_and_carries_error_field() -> None:
    """An HTTP error from a reachable host is final; no other candidate is tried."""
    handler = Recorder(
        responses={
            "/api/permit-rules/9": lambda r: httpx.Response(404, json={"error": "Not found"})
        }
    )
    client = _client(handler, [UP, ALSO_UP])
    with pytest.raises(AdminApiError) as exc_info:
        await client.get("/api/permit-rules/9")
    err = exc_info.value
    assert err.status == 404
    assert err.message == "Not found"
    assert err.endpoint == "/api/permit-rules/9"
    assert len(handler.calls) == 1
    assert client.working_base_url is None


async def test_error_message_falls_back_to_text_then_status() -> None:
    handler = Recorder(
        responses={
            "/text": lambda r: httpx.Response(500, text="upstream exploded"),
            "/empty": lambda r: httpx.Response(502),
        }
    )
    client = _client(handler, [UP])
    with pytest.raises(AdminApiError) as exc_info:
        await client.get("/text")
    assert exc_info.value.message == "upstream exploded"
    with pytest.raises(AdminApiError) as exc_info:
        await client.get("/empty")
    assert exc_info.value.message == "HTTP 502"


async def test_204_returns_none() -> None:
    handler = Recorder(responses={"/api/x/1": lambda r: httpx.Response(204)})
    client = _client(handler, [UP])
    assert await client.delete("/api/x/1") is None
    assert client.working_base_url == UP


async def test_invalid_json_success_raises_with_response_status() -> None:
    handler = Recorder(responses={"/odd": lambda r: httpx.Response(200, text="<html>")})
    client = _client(handler, [UP])
    with pytest.raises(AdminApiError) as exc_info:
        await client.get("/odd")
    assert exc_info.value.status == 200


async def test_headers_and_json_body_are_sent() -> None:
    seen: dict = {}

    def capture(request: httpx.Request) -> httpx.Response:
        seen["content_type"] = request.headers.get("content-type")
        seen["authorization"] = request.headers.get("authorization")
        seen["body"] = request.content
        return httpx.Response(200, json={"ok": True})

    http = httpx.AsyncClient(transport=httpx.MockTransport(capture))
    client = AdminApiClient(
        [UP], http_client=http, default_headers={"Authorization": "Bearer t"}
    )
    await client.post("/api/permit-rules", json={"title": "x"})
    assert seen["content_type"] == "application/json"
    assert seen["authorization"] == "Bearer t"
    assert json.loads(seen["body"]) == {"title": "x"}


async def test_timeout_counts_as_network_failure() -> None:
    def slow_then_ok(request: httpx.Request) -> httpx.Response:
        if request.url.host == "down.test":
            raise httpx.ReadTimeout("timed out", request=request)
        return httpx.Response(200, json=[])

    http = httpx.AsyncClient(transport=httpx.MockTransport(slow_then_ok))
    client = AdminApiClient([DOWN, UP], http_client=http)
    assert await client.get("/api/permit-rules") == []
    assert client.working_base_url == UP


async def test_aclose_leaves_injected_http_client_open() -> None:
    http = httpx.AsyncClient(transport=httpx.MockTransport(Recorder()))
    async with AdminApiClient([UP], http_client=http):
        pass
    assert not http.is_closed
    await http.aclose()


def _corrupt_gzip(request: httpx.Request) -> httpx.Response:
    return httpx.Response(
        200,
        headers={"content-encoding": "gzip"},
        stream=httpx.ByteStream(b"not gzip"),
    )


async def test_undecodable_content_raises_typed_error_without_failover() -> None:
    """A body that cannot be decompressed is final: status 0, no other candidate tried."""
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.host)
        return _corrupt_gzip(request)

    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = AdminApiClient([UP, ALSO_UP], http_client=http)
    with pytest.raises(AdminApiError) as exc_info:
        await client.get("/api/permit-rules")
    err = exc_info.value
    assert err.status == UNREACHABLE_STATUS
    assert err.endpoint == "/api/permit-rules"
    assert isinstance(err.__cause__, httpx.DecodingError)
    assert calls == ["up.test"]
    assert client.working_base_url is None

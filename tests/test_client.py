"""Tests for PlaceholderClient using httpx.MockTransport."""
from __future__ import annotations

import asyncio

import httpx
import pytest

from post_browser.client import FetchError, PlaceholderClient


def _fetch(handler, kind, filters=None):
    async def _run():
        async with PlaceholderClient(
            "https://api.example.test/",
            transport=httpx.MockTransport(handler),
        ) as client:
            return await client.fetch_collection(kind, filters)

    return asyncio.run(_run())


def test_fetch_collection_builds_scoped_request():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"id": 1}, {"id": 2}])

    records = _fetch(handler, "posts", {"userId": 3})

    assert records == [{"id": 1}, {"id": 2}]
    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/posts"
    assert seen[0].url.params["userId"] == "3"


def test_fetch_collection_without_filter():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.host == "api.example.test"
        assert request.url.path == "/users"
        assert len(request.url.params) == 0
        return httpx.Response(200, json=[])

    assert _fetch(handler, "users") == []


def test_http_error_status_is_fetch_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="down")

    with pytest.raises(FetchError):
        _fetch(handler, "users")


def test_transport_error_is_fetch_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("no route", request=request)

    with pytest.raises(FetchError):
        _fetch(handler, "comments", {"postId": 1})


def test_invalid_json_is_fetch_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>not json</html>")

    with pytest.raises(FetchError, match="invalid JSON"):
        _fetch(handler, "albums")


def test_non_list_body_is_fetch_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"id": 1})

    with pytest.raises(FetchError, match="expected a list"):
        _fetch(handler, "todos")


def test_unknown_kind_is_rejected():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    with pytest.raises(ValueError, match="Unknown resource kind"):
        _fetch(handler, "photos")


def test_unknown_filter_is_rejected():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    with pytest.raises(ValueError, match="Unsupported filter keys"):
        _fetch(handler, "posts", {"albumId": 1})

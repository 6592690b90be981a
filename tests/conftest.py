"""Pytest configuration and fixtures."""

from __future__ import annotations

import json
from typing import Any, Callable
from unittest.mock import AsyncMock

import httpx
import pytest
from mcp.server.fastmcp import FastMCP

from coolify_mcp.client import CoolifyClient
from coolify_mcp.tools import register_tools

BASE_URL = "https://coolify.example.com"
TOKEN = "test-token"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


def json_response(payload: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return handler


def unreachable(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


def content_text(result: Any) -> str:
    # FastMCP.call_tool returns the content list, or (content, structured) on some releases.
    if isinstance(result, tuple):
        result = result[0]
    assert len(result) == 1
    return result[0].text


def content_json(result: Any) -> Any:
    return json.loads(content_text(result))


@pytest.fixture
def make_client():
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> tuple[CoolifyClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        return CoolifyClient(BASE_URL, TOKEN, transport=transport), transport

    return _make


@pytest.fixture
def mock_client():
    return AsyncMock(spec=CoolifyClient)


@pytest.fixture
def tool_server(mock_client):
    mcp = FastMCP("coolify-test")
    register_tools(mcp, mock_client)
    return mcp

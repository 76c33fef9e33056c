"""Shared fixtures: a mocked Instant Answer API and capturing consoles."""

from __future__ import annotations

import io
import json
from typing import Callable

import httpx
import pytest
from rich.console import Console

from adapters.http_client import build_client
from core.config import AppSettings

HELLO_PAYLOAD = {"AbstractText": "Hello", "AbstractURL": "", "RelatedTopics": []}

TWO_TOPICS_PAYLOAD = {
    "AbstractText": "X",
    "AbstractURL": "http://example.com",
    "RelatedTopics": [
        {"FirstURL": "http://a", "Text": "A"},
        {"FirstURL": "http://b", "Text": "B"},
    ],
}


class UnreadBody(httpx.SyncByteStream):
    """Body that is only produced when iterated, like a real network stream."""

    def __init__(self, content: bytes) -> None:
        self._content = content

    def __iter__(self):
        yield self._content


class RecordingApi:
    """MockTransport handler that records requests and replies with a fixed body."""

    def __init__(self, body: str | bytes, status_code: int = 200) -> None:
        self.body = body
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        content = self.body.encode("utf-8") if isinstance(self.body, str) else self.body
        return httpx.Response(self.status_code, stream=UnreadBody(content))


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def make_api() -> Callable[..., RecordingApi]:
    def _make(payload: object, status_code: int = 200) -> RecordingApi:
        body = payload if isinstance(payload, (str, bytes)) else json.dumps(payload)
        return RecordingApi(body, status_code)

    return _make


@pytest.fixture
def make_client(settings: AppSettings) -> Callable[[RecordingApi], httpx.Client]:
    def _make(api: RecordingApi) -> httpx.Client:
        return build_client(settings, transport=httpx.MockTransport(api))

    return _make


@pytest.fixture
def plain_console() -> Console:
    """Console without colors, for asserting on layout."""

    return Console(file=io.StringIO(), no_color=True, highlight=False, soft_wrap=True, width=120)


@pytest.fixture
def color_console() -> Console:
    return Console(
        file=io.StringIO(),
        force_terminal=True,
        color_system="standard",
        highlight=False,
        soft_wrap=True,
        width=120,
    )

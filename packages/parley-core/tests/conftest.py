"""Shared fixtures: an ApiClient backed by httpx.MockTransport."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from parley.config import LLMConfig
from parley.transport import ApiClient


class RecordingBackend:
    """Answers every request via *responder* and keeps what was sent."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]) -> None:
        self.responder = responder
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)

    def client(self) -> ApiClient:
        return ApiClient(timeout=5.0, transport=httpx.MockTransport(self))


@pytest.fixture
def llm_config() -> LLMConfig:
    return LLMConfig(api_key="test-key", model="test-model", temperature=0.2, max_tokens=256)


@pytest.fixture
def backend_factory() -> Callable[..., RecordingBackend]:
    def _make(responder: Callable[[httpx.Request], httpx.Response]) -> RecordingBackend:
        return RecordingBackend(responder)

    return _make


def json_response(payload: dict, status: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(status, json=payload)


def text_response(body: str, status: int) -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(status, text=body)


def raising(exc_type: type[httpx.RequestError]) -> Callable[[httpx.Request], httpx.Response]:
    def _raise(request: httpx.Request) -> httpx.Response:
        raise exc_type("simulated failure", request=request)

    return _raise

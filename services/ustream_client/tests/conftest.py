"""Shared fixtures: a recording fake backend built on httpx.MockTransport."""
from typing import Callable

import httpx
import pytest

from ustream_client.config import ClientSettings

BASE_URL = "http://backend.test/chatbot"


class RecordingBackend:
    """Fake backend that records every request it sees."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self._handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(base_url=BASE_URL)


@pytest.fixture
def make_backend() -> Callable[..., RecordingBackend]:
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> RecordingBackend:
        return RecordingBackend(handler)

    return _make

from typing import Callable

import httpx
import pytest

from pickup_mtaani import PickupMtaaniClient

API_KEY = "test-api-key"
BASE_URL = "https://api.test/api/v1"


class RecordingHandler:
    """Answers every request with a canned response and remembers what it saw."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]):
        self.respond = respond
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    for name in ("API_KEY", "BASE_URL", "TIMEOUT", "RETRIES", "DEBUG"):
        monkeypatch.delenv(f"PICKUP_MTAANI_{name}", raising=False)
    # keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def make_client():
    def _make(respond, **kwargs) -> tuple[PickupMtaaniClient, RecordingHandler]:
        handler = RecordingHandler(respond)
        client = PickupMtaaniClient(
            api_key=API_KEY,
            base_url=BASE_URL,
            transport=httpx.MockTransport(handler),
            **kwargs,
        )
        return client, handler

    return _make

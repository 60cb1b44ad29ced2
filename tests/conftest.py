"""Shared fixtures: a stand-in for requests.Session that never touches the network."""

from __future__ import annotations

import pytest
import requests


class FakeResponse:
    def __init__(self, body: bytes, status_code: int = 200):
        self._body = body
        self.status_code = status_code
        self.closed = False
        self.chunk_sizes: list[int] = []

    def iter_content(self, chunk_size: int = 1):
        self.chunk_sizes.append(chunk_size)
        for i in range(0, len(self._body), chunk_size):
            yield self._body[i:i + chunk_size]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False


class FakeSession:
    """Records requested URLs and replays canned bodies or raises errors."""

    def __init__(self, body: str | bytes = b"{}", status_code: int = 200, error: Exception | None = None):
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.body = body
        self.status_code = status_code
        self.error = error
        self.calls: list[dict] = []
        self.responses: list[FakeResponse] = []
        self.closed = False

    def get(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        response = FakeResponse(self.body, self.status_code)
        self.responses.append(response)
        return response

    def close(self):
        self.closed = True

    @property
    def urls(self) -> list[str]:
        return [c["url"] for c in self.calls]


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession('{"status":"ok"}')


@pytest.fixture
def unreachable_session() -> FakeSession:
    err = requests.exceptions.ConnectionError(
        "HTTPSConnectionPool(host='api.rbxstats.xyz', port=443): Max retries exceeded"
    )
    return FakeSession(error=err)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the user's ~/.rbxstatsrc and environment."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    for var in ("RBXSTATS_API_KEY", "RBXSTATS_BASE_URL", "RBXSTATS_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path

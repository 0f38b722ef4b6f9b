from __future__ import annotations

import httpx
import pytest

from untappd_client.config_types import ClientConfig


@pytest.fixture
def cfg() -> ClientConfig:
    return ClientConfig(client_id="foo", client_secret="bar", base_url="http://untappd.test/v4")


@pytest.fixture
def mock_http():
    clients: list[httpx.Client] = []

    def _make(handler):
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make
    for c in clients:
        c.close()

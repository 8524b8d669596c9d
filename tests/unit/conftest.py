"""
Shared fixtures for unit tests.

The HTTP layer is faked with ``httpx.MockTransport``; ``FakeAPI`` routes
requests by method and path and records what was sent.
"""

from __future__ import annotations

import json
from collections import deque
from collections.abc import Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio
from prometheus_client import CollectorRegistry

from megaport import ClientConfig, MegaportClient, StaticTokenProvider, WaitConfig
from megaport.observability.collector import UnifiedMetricsCollector

BASE_URL = "https://api.test"

Responder = Callable[[httpx.Request], httpx.Response]


def envelope(data: Any, status_code: int = 200) -> httpx.Response:
    """A standard ``{message, terms, data}`` response."""
    return httpx.Response(
        status_code, json={"message": "ok", "terms": "", "data": data}
    )


class FakeAPI:
    """
    Route table for MockTransport.

    A route holds a queue of responses; the last one repeats once the queue
    is drained, which suits polling.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], deque[httpx.Response | Responder]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, *responses: httpx.Response | Responder) -> None:
        self.routes[(method.upper(), path)] = deque(responses)

    def reply(self, method: str, path: str, *data: Any) -> None:
        """Route answering with one envelope per ``data`` item, in order."""
        self.add(method, path, *(envelope(d) for d in data))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self.routes.get((request.method, request.url.path))
        if not queue:
            return httpx.Response(404, json={"message": f"no route for {request.url.path}"})
        response = queue.popleft() if len(queue) > 1 else queue[0]
        if callable(response):
            return response(request)
        return response

    def sent(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def last_json(self, method: str, path: str) -> Any:
        return json.loads(self.sent(method, path)[-1].content)


@pytest.fixture
def fake_api() -> FakeAPI:
    return FakeAPI()


@pytest.fixture
def metrics() -> UnifiedMetricsCollector:
    return UnifiedMetricsCollector(registry=CollectorRegistry())


@pytest.fixture
def fast_wait() -> WaitConfig:
    return WaitConfig(poll_interval=0.01, timeout=0.5, progress_log_every=2)


@pytest_asyncio.fixture
async def client(fake_api, metrics, fast_wait):
    http = httpx.AsyncClient(transport=httpx.MockTransport(fake_api.handler))
    config = ClientConfig(base_url=BASE_URL, wait=fast_wait)
    megaport = MegaportClient(
        config,
        token_provider=StaticTokenProvider("test-token"),
        http_client=http,
        metrics=metrics,
    )
    yield megaport
    await megaport.aclose()
    await http.aclose()

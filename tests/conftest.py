from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest
from loguru import logger


@pytest.fixture
def log_records():
    """Collect ``(level, message)`` pairs emitted through loguru."""
    records: list[tuple[str, str]] = []
    handler_id = logger.add(
        lambda msg: records.append((msg.record["level"].name, msg.record["message"])),
        level="DEBUG",
    )
    yield records
    logger.remove(handler_id)


def _json_transport(
    routes: dict[str, Callable[[httpx.Request], httpx.Response] | httpx.Response],
    seen: list[httpx.Request] | None = None,
) -> httpx.MockTransport:
    """Mock transport keyed by ``host + raw path``; unknown URLs get a 404."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        key = request.url.host + request.url.raw_path.decode()
        route = routes.get(key)
        if route is None:
            return httpx.Response(404, json={"message": "Not Found"})
        if callable(route):
            return route(request)
        return route

    return httpx.MockTransport(handler)


@pytest.fixture
def json_transport():
    """Factory for mock transports; see ``_json_transport``."""
    return _json_transport

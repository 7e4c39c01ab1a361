"""Prometheus request metrics for the API.

One registry per process; every app built by ``create_app`` records into it
and ``GET /metrics`` exposes it in the text format.
"""

from __future__ import annotations

import time
from typing import Any, Awaitable, Callable

from fastapi import Request, Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

REGISTRY = CollectorRegistry()
REQUESTS = Counter(
    "requests_total",
    "API requests by route, method and response status",
    ["path", "method", "status"],
    registry=REGISTRY,
)
LATENCY = Histogram(
    "request_latency_seconds",
    "Time spent serving an API request, store call included",
    ["path", "method"],
    registry=REGISTRY,
)


async def metrics_app(_req: Request | None = None) -> Response:
    return Response(content=generate_latest(REGISTRY), media_type=CONTENT_TYPE_LATEST)


def _route_path(scope: dict[str, Any]) -> str:
    # /api/course/{course_id} rather than /api/course/17
    route = scope.get("route")
    template = getattr(route, "path", None)
    if isinstance(template, str) and template:
        return template
    return scope.get("path", "")


class MetricsMiddleware:
    """ASGI middleware timing each HTTP request.

    A request that raises before a response starts is counted as a 500.
    """

    def __init__(self, app: Callable[..., Awaitable[Any]]):
        self.app = app

    async def __call__(
        self,
        scope: dict[str, Any],
        receive: Callable[..., Awaitable[Any]],
        send: Callable[..., Awaitable[Any]],
    ) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        method = scope.get("method", "GET")
        started = time.perf_counter()
        response_status = 500

        async def _record_status(message: dict[str, Any]) -> None:
            nonlocal response_status
            if message.get("type") == "http.response.start":
                response_status = message.get("status", 200)
            await send(message)

        try:
            await self.app(scope, receive, _record_status)
        finally:
            path = _route_path(scope)
            LATENCY.labels(path=path, method=method).observe(
                time.perf_counter() - started
            )
            REQUESTS.labels(
                path=path, method=method, status=str(response_status)
            ).inc()


__all__ = ["REGISTRY", "REQUESTS", "LATENCY", "metrics_app", "MetricsMiddleware"]

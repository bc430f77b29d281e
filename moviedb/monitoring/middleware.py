"""Prometheus metrics middleware for FastAPI.

Counts requests and measures latency per route template, so
/movies/data/tt0111161 and /movies/data/tt0068646 share a series.
"""

import time

from prometheus_client import Counter, Histogram, make_asgi_app
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Match

HTTP_REQUESTS_TOTAL = Counter(
    "moviedb_http_requests_total",
    "Total HTTP requests",
    ["method", "route", "status"],
)

HTTP_REQUEST_DURATION = Histogram(
    "moviedb_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "route"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Records HTTP request metrics, skipping /metrics itself."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path.startswith("/metrics"):
            return await call_next(request)

        route = _route_template(request)
        start = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start

        HTTP_REQUESTS_TOTAL.labels(
            method=request.method, route=route, status=str(response.status_code)
        ).inc()
        HTTP_REQUEST_DURATION.labels(method=request.method, route=route).observe(duration)
        return response


def _route_template(request: Request) -> str:
    """Path template of the matching route, or the raw path."""
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return getattr(route, "path", request.url.path)
    return request.url.path


def mount_metrics(app) -> None:
    """Mount the /metrics Prometheus endpoint on a FastAPI app.

    The mounted sub-app bypasses route dependencies, so it
    needs no bearer token.
    """
    app.mount("/metrics", make_asgi_app())

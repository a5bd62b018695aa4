"""Middleware — function and class middleware.

Demonstrates:
- Function middleware (timing — adds X-Response-Time header)
- Class middleware (rate limiter — 5 req/min per client, 429 when exceeded)
- Built-in SecurityHeaders and access_log
- Registration order: the first middleware added runs outermost

Run:
    uvicorn app:mux
"""

import threading
import time

from segmux import Endpoint, Mux, Request, Response, param
from segmux.middleware import SecurityHeaders, access_log

mux = Mux()


def timing(next: Endpoint) -> Endpoint:
    """Add X-Response-Time header to every routed response."""

    async def handler(request: Request) -> Response:
        start = time.monotonic()
        response = await next(request)
        elapsed = time.monotonic() - start
        return response.with_header("X-Response-Time", f"{elapsed:.3f}s")

    return handler


class RateLimiter:
    """Per-client rate limiter. Returns 429 when the limit is exceeded."""

    def __init__(self, max_requests: int, window: float) -> None:
        self.max_requests = max_requests
        self.window = window
        self._counts: dict[str, list[float]] = {}
        self._lock = threading.Lock()

    def __call__(self, next: Endpoint) -> Endpoint:
        async def handler(request: Request) -> Response:
            client_ip = request.headers.get("x-forwarded-for", "127.0.0.1")
            if "," in client_ip:
                client_ip = client_ip.split(",")[0].strip()

            with self._lock:
                now = time.monotonic()
                hits = self._counts.setdefault(client_ip, [])
                hits[:] = [t for t in hits if now - t < self.window]
                if len(hits) >= self.max_requests:
                    return Response("Too Many Requests").with_status(429)
                hits.append(now)

            return await next(request)

        return handler


mux.use(access_log)
mux.use(timing)
mux.use(RateLimiter(max_requests=5, window=60.0))
mux.use(SecurityHeaders())


@mux.get("/")
def index(request: Request):
    return "<h1>Middleware demo</h1>"


@mux.get("/users/:id")
def user(request: Request):
    return {"id": param(request, "id")}

"""Middleware type and the chain builder.

A middleware transforms a handler into a handler::

    def timing(next: Endpoint) -> Endpoint:
        async def handler(request: Request) -> Response:
            start = time.monotonic()
            response = await next(request)
            elapsed = time.monotonic() - start
            return response.with_header("X-Time", f"{elapsed:.3f}")

        return handler

The handler a middleware receives is always an ``Endpoint``: async, takes
the ``Request``, returns a ``Response``. The handler it returns may be sync
or async and may return anything a route handler may return; it is
normalised back to an ``Endpoint`` before the next middleware sees it.
"""

from collections.abc import Awaitable, Callable, Sequence
from typing import TypeAlias

from segmux._internal.invoke import invoke
from segmux._internal.types import Handler
from segmux.http.request import Request
from segmux.http.response import Response
from segmux.server.negotiation import negotiate

# The normalised handler shape every middleware receives
Endpoint: TypeAlias = Callable[[Request], Awaitable[Response]]

# Handler-to-handler transform
Middleware: TypeAlias = Callable[[Endpoint], Handler]


def as_endpoint(handler: Handler) -> Endpoint:
    """Wrap *handler* so it is awaitable and always yields a Response."""

    async def endpoint(request: Request) -> Response:
        return negotiate(await invoke(handler, request))

    return endpoint


def compose(middleware: Sequence[Middleware], handler: Handler) -> Endpoint:
    """Wrap *handler* in *middleware*, first-registered outermost.

    ``compose([a, b], h)`` is ``a(b(h))``: wrapping starts from the
    innermost handler and works back to the first middleware, so at call
    time ``a`` runs first and finishes last.
    """
    wrapped = as_endpoint(handler)
    for mw in reversed(middleware):
        wrapped = as_endpoint(mw(wrapped))
    return wrapped

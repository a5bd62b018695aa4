"""ASGI handler — the only component that touches raw HTTP scopes.

Converts the scope to a typed Request, matches it against the route
table, runs the matched handler inside the middleware chain (or the
not-found handler outside it) and sends the Response back through ASGI
``send()``.

Exceptions raised by handlers or middleware are not caught here. They
propagate to the ASGI server, which owns the 500 response.
"""

import logging
from collections.abc import Sequence

from segmux._internal.asgi import Receive, Scope, Send
from segmux._internal.invoke import invoke
from segmux._internal.types import Handler
from segmux.http.request import Request
from segmux.middleware.protocol import Middleware, compose
from segmux.routing.router import RouteTable
from segmux.server.negotiation import negotiate
from segmux.server.sender import send_response

logger = logging.getLogger("segmux.server")


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    table: RouteTable,
    middleware: Sequence[Middleware],
    not_found: Handler,
    debug: bool = False,
) -> None:
    """Process a single HTTP request."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)
    match = table.match(request.method, request.path)

    if match is None:
        logger.debug("404 %s %s", request.method, request.path)
        response = negotiate(await invoke(not_found, request))
    else:
        if debug:
            logger.debug(
                "%s %s -> %s %s",
                request.method,
                request.path,
                match.route.path,
                dict(match.path_params),
            )
        request = request.with_path_params(match.path_params)
        handler = compose(middleware, match.route.handler)
        response = await handler(request)

    await send_response(response, send)

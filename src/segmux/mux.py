"""The Mux — method + path pattern router with onion middleware.

Mutable during setup (routes, middleware, not-found handler), read-only
while serving. There is no global instance; construct one and hand it to
an ASGI server::

    mux = Mux()

    @mux.get("/users/:id")
    def show_user(request):
        return f"user {param(request, 'id')}"

    # uvicorn module:mux
"""

import logging
from collections.abc import Callable
from typing import overload

from segmux._internal.asgi import Receive, Scope, Send
from segmux._internal.types import Handler
from segmux.config import MuxConfig
from segmux.errors import ConfigurationError
from segmux.middleware.protocol import Middleware
from segmux.routing.route import Route
from segmux.routing.router import RouteTable
from segmux.server.handler import handle_request
from segmux.server.not_found import default_not_found

logger = logging.getLogger("segmux.server")


class Mux:
    """HTTP request multiplexer and ASGI 3.0 application.

    Routes are matched per method in registration order; the first route
    whose pattern fits wins. Path parameters are written ``:name`` and
    capture exactly one segment.

    Thread safety:
        Nothing here is locked. Register routes and middleware during a
        single-threaded setup phase, before the server starts. Once
        serving, the route table and middleware list are only read, so
        concurrent requests need no synchronisation. Registering while
        requests are in flight is unsupported.
    """

    __slots__ = (
        "_default_not_found",
        "_middleware",
        "_not_found",
        "_table",
        "config",
    )

    def __init__(self, config: MuxConfig | None = None) -> None:
        self.config: MuxConfig = config or MuxConfig()
        self._table = RouteTable()
        self._middleware: list[Middleware] = []
        self._not_found: Handler | None = None
        self._default_not_found: Handler = default_not_found(self.config)

    # -- Route registration --

    def add(self, method: str, path: str, handler: Handler) -> Route:
        """Register *handler* for *method* and *path*.

        Registering an identical pattern string for the same method again
        is a no-op: the first handler stays.
        """
        return self._table.add(method, path, handler)

    def route(self, method: str, path: str) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator."""

        def decorator(func: Handler) -> Handler:
            self.add(method, path, func)
            return func

        return decorator

    @overload
    def _register(self, method: str, path: str, handler: None) -> Callable[[Handler], Handler]: ...
    @overload
    def _register(self, method: str, path: str, handler: Handler) -> Handler: ...
    def _register(
        self, method: str, path: str, handler: Handler | None
    ) -> Handler | Callable[[Handler], Handler]:
        if handler is None:
            return self.route(method, path)
        self.add(method, path, handler)
        return handler

    @overload
    def connect(self, path: str, handler: None = None) -> Callable[[Handler], Handler]: ...
    @overload
    def connect(self, path: str, handler: Handler) -> Handler: ...
    def connect(
        self, path: str, handler: Handler | None = None
    ) -> Handler | Callable[[Handler], Handler]:
        """Add a CONNECT route. Without *handler*, returns a decorator."""
        return self._register("CONNECT", path, handler)

    @overload
    def delete(self, path: str, handler: None = None) -> Callable[[Handler], Handler]: ...
    @overload
    def delete(self, path: str, handler: Handler) -> Handler: ...
    def delete(
        self, path: str, handler: Handler | None = None
    ) -> Handler | Callable[[Handler], Handler]:
        """Add a DELETE route. Without *handler*, returns a decorator."""
        return self._register("DELETE", path, handler)

    @overload
    def get(self, path: str, handler: None = None) -> Callable[[Handler], Handler]: ...
    @overload
    def get(self, path: str, handler: Handler) -> Handler: ...
    def get(
        self, path: str, handler: Handler | None = None
    ) -> Handler | Callable[[Handler], Handler]:
        """Add a GET route. Without *handler*, returns a decorator."""
        return self._register("GET", path, handler)

    @overload
    def head(self, path: str, handler: None = None) -> Callable[[Handler], Handler]: ...
    @overload
    def head(self, path: str, handler: Handler) -> Handler: ...
    def head(
        self, path: str, handler: Handler | None = None
    ) -> Handler | Callable[[Handler], Handler]:
        """Add a HEAD route. Without *handler*, returns a decorator."""
        return self._register("HEAD", path, handler)

    @overload
    def options(self, path: str, handler: None = None) -> Callable[[Handler], Handler]: ...
    @overload
    def options(self, path: str, handler: Handler) -> Handler: ...
    def options(
        self, path: str, handler: Handler | None = None
    ) -> Handler | Callable[[Handler], Handler]:
        """Add an OPTIONS route. Without *handler*, returns a decorator."""
        return self._register("OPTIONS", path, handler)

    @overload
    def patch(self, path: str, handler: None = None) -> Callable[[Handler], Handler]: ...
    @overload
    def patch(self, path: str, handler: Handler) -> Handler: ...
    def patch(
        self, path: str, handler: Handler | None = None
    ) -> Handler | Callable[[Handler], Handler]:
        """Add a PATCH route. Without *handler*, returns a decorator."""
        return self._register("PATCH", path, handler)

    @overload
    def post(self, path: str, handler: None = None) -> Callable[[Handler], Handler]: ...
    @overload
    def post(self, path: str, handler: Handler) -> Handler: ...
    def post(
        self, path: str, handler: Handler | None = None
    ) -> Handler | Callable[[Handler], Handler]:
        """Add a POST route. Without *handler*, returns a decorator."""
        return self._register("POST", path, handler)

    @overload
    def put(self, path: str, handler: None = None) -> Callable[[Handler], Handler]: ...
    @overload
    def put(self, path: str, handler: Handler) -> Handler: ...
    def put(
        self, path: str, handler: Handler | None = None
    ) -> Handler | Callable[[Handler], Handler]:
        """Add a PUT route. Without *handler*, returns a decorator."""
        return self._register("PUT", path, handler)

    @overload
    def trace(self, path: str, handler: None = None) -> Callable[[Handler], Handler]: ...
    @overload
    def trace(self, path: str, handler: Handler) -> Handler: ...
    def trace(
        self, path: str, handler: Handler | None = None
    ) -> Handler | Callable[[Handler], Handler]:
        """Add a TRACE route. Without *handler*, returns a decorator."""
        return self._register("TRACE", path, handler)

    @property
    def routes(self) -> list[Route]:
        """All registered routes, grouped by method in registration order."""
        return self._table.routes

    # -- Middleware --

    def use(self, middleware: Middleware) -> Middleware:
        """Append a middleware. The first one added runs outermost."""
        if not callable(middleware):
            msg = f"Middleware must be callable, got {middleware!r}"
            raise ConfigurationError(msg)
        self._middleware.append(middleware)
        return middleware

    # -- Not found --

    def not_found(self, handler: Handler) -> Handler:
        """Set the handler called when no route matches.

        Middleware does not wrap it.
        """
        if not callable(handler):
            msg = f"Not-found handler must be callable, got {handler!r}"
            raise ConfigurationError(msg)
        self._not_found = handler
        return handler

    def not_found_handler(self) -> Handler:
        """The configured not-found handler, or the plain 404 default."""
        if self._not_found is not None:
            return self._not_found
        return self._default_not_found

    # -- ASGI --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(
            scope,
            receive,
            send,
            table=self._table,
            middleware=tuple(self._middleware),
            not_found=self.not_found_handler(),
            debug=self.config.debug,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Acknowledge lifespan startup and shutdown; there is nothing to run."""
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                logger.debug("serving %d routes", len(self._table))
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

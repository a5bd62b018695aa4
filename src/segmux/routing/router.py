"""Route table with first-registered-wins linear matching.

Routes are kept per HTTP method in registration order. Matching walks
that list and compares segment by segment; there is no trie and no
specificity ranking. Route tables are small, so the scan is cheap.
"""

import logging

from segmux._internal.types import Handler
from segmux.errors import ConfigurationError
from segmux.routing.route import PathSegment, Route, RouteMatch

logger = logging.getLogger("segmux.routing")


def split_path(path: str) -> list[str]:
    """Split a request path or route pattern on every ``/``.

    Empty pieces are kept::

        "/"            -> ["", ""]
        "/users/42"    -> ["", "users", "42"]
        "/a//b"        -> ["", "a", "", "b"]
    """
    return path.split("/")


def parse_path(path: str) -> tuple[PathSegment, ...]:
    """Parse a route pattern into segments.

    A piece starting with ``:`` is a named parameter; everything else must
    match literally::

        "/users/:id" -> (PathSegment(""), PathSegment("users"),
                         PathSegment(":id", is_param=True, param_name="id"))
    """
    segments: list[PathSegment] = []
    for part in split_path(path):
        if part.startswith(":"):
            segments.append(PathSegment(value=part, is_param=True, param_name=part[1:]))
        else:
            segments.append(PathSegment(value=part))
    return tuple(segments)


class RouteTable:
    """Routes grouped by HTTP method, in registration order.

    Usage::

        table = RouteTable()
        table.add("GET", "/users/:id", handler)
        match = table.match("GET", "/users/42")
        match.path_params  # {"id": "42"}

    Thread safety:
        Not locked. Register during setup, then only read. Adding routes
        while requests are being matched is unsupported.
    """

    __slots__ = ("_routes",)

    def __init__(self) -> None:
        self._routes: dict[str, list[Route]] = {}

    def add(self, method: str, path: str, handler: Handler) -> Route:
        """Register *handler* for *method* and *path*.

        Registering the same pattern string twice for a method keeps the
        first route; the later call is ignored and the existing route is
        returned.
        """
        if not method:
            msg = f"Route method must be a non-empty string, got {method!r}."
            raise ConfigurationError(msg)
        if not path:
            msg = f"Route path must be a non-empty string, got {path!r}."
            raise ConfigurationError(msg)
        if not callable(handler):
            msg = f"Handler for {method} {path!r} is not callable: {handler!r}"
            raise ConfigurationError(msg)

        routes = self._routes.setdefault(method, [])
        for existing in routes:
            if existing.path == path:
                logger.debug("ignoring duplicate route %s %s", method, path)
                return existing

        route = Route(method=method, path=path, handler=handler, segments=parse_path(path))
        routes.append(route)
        return route

    def match(self, method: str, path: str) -> RouteMatch | None:
        """Return the first route for *method* whose pattern fits *path*.

        Returns ``None`` when the method has no routes or none fits.
        """
        routes = self._routes.get(method)
        if not routes:
            return None

        parts = split_path(path)
        for route in routes:
            params = _match_segments(route.segments, parts)
            if params is not None:
                return RouteMatch(route=route, path_params=params)
        return None

    @property
    def routes(self) -> list[Route]:
        """All routes, grouped by method in the order methods first appeared."""
        return [route for routes in self._routes.values() for route in routes]

    @property
    def methods(self) -> tuple[str, ...]:
        """Methods with at least one registered route."""
        return tuple(self._routes)

    def __len__(self) -> int:
        return sum(len(routes) for routes in self._routes.values())


def _match_segments(segments: tuple[PathSegment, ...], parts: list[str]) -> dict[str, str] | None:
    """Compare a route's segments to path pieces; return params or None."""
    if len(segments) != len(parts):
        return None

    params: dict[str, str] = {}
    for seg, part in zip(segments, parts, strict=True):
        if seg.is_param:
            params[seg.param_name or ""] = part
        elif seg.value != part:
            return None
    return params

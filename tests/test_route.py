"""Tests for segmux.routing.route — Route, RouteMatch, PathSegment."""

import pytest

from segmux.routing.route import PathSegment, Route, RouteMatch
from segmux.routing.router import parse_path


def _handler(request: object) -> str:
    return "ok"


class TestPathSegment:
    def test_literal(self) -> None:
        seg = PathSegment(value="users")
        assert seg.value == "users"
        assert seg.is_param is False
        assert seg.param_name is None

    def test_param(self) -> None:
        seg = PathSegment(value=":id", is_param=True, param_name="id")
        assert seg.is_param is True
        assert seg.param_name == "id"

    def test_frozen(self) -> None:
        seg = PathSegment(value="users")
        with pytest.raises(AttributeError):
            seg.value = "other"  # type: ignore[misc]


class TestRoute:
    def test_fields(self) -> None:
        route = Route(method="GET", path="/users", handler=_handler, segments=parse_path("/users"))
        assert route.method == "GET"
        assert route.path == "/users"
        assert route.handler is _handler
        assert len(route.segments) == 2

    def test_param_names_in_pattern_order(self) -> None:
        path = "/orgs/:org/repos/:repo"
        route = Route(method="GET", path=path, handler=_handler, segments=parse_path(path))
        assert route.param_names == ("org", "repo")

    def test_param_names_empty_for_literal_route(self) -> None:
        route = Route(method="GET", path="/", handler=_handler, segments=parse_path("/"))
        assert route.param_names == ()

    def test_frozen(self) -> None:
        route = Route(method="GET", path="/", handler=_handler, segments=parse_path("/"))
        with pytest.raises(AttributeError):
            route.path = "/other"  # type: ignore[misc]


class TestRouteMatch:
    def test_fields(self) -> None:
        route = Route(method="GET", path="/x/:id", handler=_handler, segments=parse_path("/x/:id"))
        match = RouteMatch(route=route, path_params={"id": "1"})
        assert match.route is route
        assert match.path_params == {"id": "1"}

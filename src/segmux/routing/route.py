"""Route, PathSegment and RouteMatch frozen dataclasses."""

from collections.abc import Mapping
from dataclasses import dataclass

from segmux._internal.types import Handler


@dataclass(frozen=True, slots=True)
class PathSegment:
    """One ``/``-delimited piece of a route pattern.

    Literal:  ``users``  (is_param=False)
    Param:    ``:id``    (is_param=True, param_name="id")
    Bare:     ``:``      (is_param=True, param_name="")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


@dataclass(frozen=True, slots=True)
class Route:
    """A registered route. Created once at registration, never mutated."""

    method: str
    path: str
    handler: Handler
    segments: tuple[PathSegment, ...]

    @property
    def param_names(self) -> tuple[str, ...]:
        """Names of the parameter segments, in pattern order."""
        return tuple(seg.param_name or "" for seg in self.segments if seg.is_param)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    path_params: Mapping[str, str]

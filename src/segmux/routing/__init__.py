"""Routing — per-method route table with linear first-match lookup.

Routes are registered during setup and matched segment by segment at
request time.
"""

from segmux.routing.params import param, param_int
from segmux.routing.route import PathSegment, Route, RouteMatch
from segmux.routing.router import RouteTable, parse_path, split_path

__all__ = [
    "PathSegment",
    "Route",
    "RouteMatch",
    "RouteTable",
    "param",
    "param_int",
    "parse_path",
    "split_path",
]

"""Segmux — a small HTTP request router for ASGI.

Routes are an HTTP method plus a ``/``-separated pattern whose ``:name``
segments capture one path segment each. The first registered route that
fits wins. Middleware are handler-to-handler transforms applied in onion
order around the matched handler.

Basic usage::

    from segmux import Mux, param

    mux = Mux()

    @mux.get("/")
    def index(request):
        return "Hello, World!"

    @mux.get("/users/:id")
    def user(request):
        return {"id": param(request, "id")}
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Endpoint",
    "Middleware",
    "Mux",
    "MuxConfig",
    "Request",
    "Response",
    "SegmuxError",
    "param",
    "param_int",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import segmux`` fast while providing a clean top-level API.
    """
    if name == "Mux":
        from segmux.mux import Mux

        return Mux

    if name == "MuxConfig":
        from segmux.config import MuxConfig

        return MuxConfig

    if name == "Request":
        from segmux.http.request import Request

        return Request

    if name == "Response":
        from segmux.http.response import Response

        return Response

    if name in ("param", "param_int"):
        from segmux.routing import params as _params

        return getattr(_params, name)

    if name in ("Endpoint", "Middleware"):
        from segmux.middleware import protocol as _mw

        return getattr(_mw, name)

    if name in ("ConfigurationError", "SegmuxError"):
        from segmux import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

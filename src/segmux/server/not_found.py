"""Default not-found handler."""

from collections.abc import Callable

from segmux.config import MuxConfig
from segmux.http.request import Request
from segmux.http.response import Response


def default_not_found(config: MuxConfig) -> Callable[[Request], Response]:
    """Build the plain-text 404 handler used when none is configured."""

    def not_found(request: Request) -> Response:
        return Response(
            body=config.not_found_body,
            status=404,
            content_type=config.not_found_content_type,
            headers=(("X-Content-Type-Options", "nosniff"),),
        )

    return not_found

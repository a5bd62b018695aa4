"""Access log middleware.

Logs one INFO line per routed request to the ``segmux.access`` logger.
Unmatched requests never reach middleware, so 404s from the fallback are
not logged here.
"""

import logging
import time

from segmux.http.request import Request
from segmux.http.response import Response
from segmux.middleware.protocol import Endpoint

logger = logging.getLogger("segmux.access")


def access_log(next: Endpoint) -> Endpoint:
    """Log method, path, status and elapsed milliseconds."""

    async def handler(request: Request) -> Response:
        start = time.perf_counter()
        response = await next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s %d %.1fms",
            request.method,
            request.path,
            response.status,
            elapsed_ms,
        )
        return response

    return handler

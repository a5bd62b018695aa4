"""Middleware — handler-to-handler transforms, applied in onion order.

A middleware is any callable matching:
    def mw(next: Endpoint) -> Handler

Built-in middleware:
    SecurityHeaders -- X-Frame-Options, X-Content-Type-Options, Referrer-Policy
    access_log -- one INFO log line per routed request
"""

from segmux.middleware.access_log import access_log
from segmux.middleware.protocol import Endpoint, Middleware, as_endpoint, compose
from segmux.middleware.security_headers import SecurityHeaders, SecurityHeadersConfig

__all__ = [
    "Endpoint",
    "Middleware",
    "SecurityHeaders",
    "SecurityHeadersConfig",
    "access_log",
    "as_endpoint",
    "compose",
]

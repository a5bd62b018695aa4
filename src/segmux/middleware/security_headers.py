"""Security headers middleware — X-Frame-Options, X-Content-Type-Options, Referrer-Policy.

Applied only to text/html responses. JSON, plain text and binary
responses pass through untouched.
"""

from dataclasses import dataclass

from segmux.http.request import Request
from segmux.http.response import Response
from segmux.middleware.protocol import Endpoint


@dataclass(frozen=True, slots=True)
class SecurityHeadersConfig:
    """Header values to apply. ``None`` leaves the optional ones off."""

    x_frame_options: str = "DENY"
    x_content_type_options: str = "nosniff"
    referrer_policy: str = "strict-origin-when-cross-origin"
    content_security_policy: str | None = None
    strict_transport_security: str | None = None


class SecurityHeaders:
    """Add security headers to HTML responses.

    Usage::

        mux.use(SecurityHeaders())
        mux.use(SecurityHeaders(SecurityHeadersConfig(x_frame_options="SAMEORIGIN")))
    """

    __slots__ = ("config",)

    def __init__(self, config: SecurityHeadersConfig | None = None) -> None:
        self.config = config or SecurityHeadersConfig()

    def __call__(self, next: Endpoint) -> Endpoint:
        config = self.config

        async def handler(request: Request) -> Response:
            response = await next(request)
            if not response.content_type.startswith("text/html"):
                return response
            secured = (
                response.with_header("X-Frame-Options", config.x_frame_options)
                .with_header("X-Content-Type-Options", config.x_content_type_options)
                .with_header("Referrer-Policy", config.referrer_policy)
            )
            if config.content_security_policy:
                secured = secured.with_header(
                    "Content-Security-Policy", config.content_security_policy
                )
            if config.strict_transport_security:
                secured = secured.with_header(
                    "Strict-Transport-Security", config.strict_transport_security
                )
            return secured

        return handler

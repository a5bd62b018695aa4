"""Segmux exception hierarchy.

Only registration raises. Dispatch never turns a miss into an exception:
unmatched requests get the not-found response instead.
"""


class SegmuxError(Exception):
    """Base for all segmux-specific errors."""


class ConfigurationError(SegmuxError):
    """Raised when a route, middleware or not-found handler is invalid.

    Raised eagerly at registration time, before anything is served.
    """

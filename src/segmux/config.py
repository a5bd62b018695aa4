"""Mux configuration.

MuxConfig is a frozen dataclass — immutable after creation, no string-key
dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MuxConfig:
    """Mux configuration. Immutable after creation.

    All fields have defaults. Override what you need::

        config = MuxConfig(debug=True, not_found_body="nothing here")
    """

    # Log every match (with extracted parameters) at DEBUG
    debug: bool = False

    # Default not-found response, used when no not-found handler is set
    not_found_body: str = "404 page not found\n"
    not_found_content_type: str = "text/plain; charset=utf-8"

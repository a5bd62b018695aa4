"""Shared type aliases used across segmux modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler — called with the Request, returns a response value (sync or async)
Handler: TypeAlias = Callable[..., Any]

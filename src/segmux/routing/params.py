"""Path parameter accessors.

Both accessors are total: a request that was never routed, or a name the
route did not capture, reads as ``""`` / ``0`` rather than raising.
"""

import re

from segmux.http.request import Request

# Optional sign, ASCII digits only. No whitespace, no underscores.
_INT_RE = re.compile(r"[+-]?[0-9]+")

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def param(request: Request, name: str) -> str:
    """Return path parameter *name*, or ``""`` if it was not captured."""
    params = getattr(request, "path_params", None)
    if not params:
        return ""
    return params.get(name, "")


def param_int(request: Request, name: str) -> int:
    """Return path parameter *name* as a base-10 integer.

    Returns ``0`` when the parameter is missing, is not a plain decimal
    integer, or does not fit in a signed 64-bit int.
    """
    value = param(request, name)
    if not _INT_RE.fullmatch(value):
        return 0
    number = int(value, 10)
    if not _INT64_MIN <= number <= _INT64_MAX:
        return 0
    return number

"""Test utilities for segmux applications::

    from segmux.testing import TestClient
"""

from segmux.testing.client import TestClient

__all__ = ["TestClient"]

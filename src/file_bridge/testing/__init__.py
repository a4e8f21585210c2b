"""Test utilities for file bridge applications::

    from file_bridge.testing import TestClient
"""

from file_bridge.testing.client import TestClient

__all__ = ["TestClient"]

"""Testing utilities for swiftlet applications.

Usage::

    from swiftlet.testing import TestClient

    async def test_index():
        async with TestClient(app) as client:
            response = await client.get("/")
            assert response.status == 200
"""

from swiftlet.testing.client import TestClient

__all__ = ["TestClient"]

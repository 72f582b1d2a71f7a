"""Tests for the health check route."""

import pytest

from tests.harness import create_api_fixture

api = create_api_fixture()


@pytest.mark.asyncio
async def test_health(api):
    response = await api.client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["version"] == "0.1.0"

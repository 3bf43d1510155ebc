"""Pytest configuration and fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient

from fry_api.dependencies import reset_dependencies
from fry_api.main import app


@pytest.fixture
def test_client() -> TestClient:
    """FastAPI test client with fresh in-memory state."""
    reset_dependencies()
    client = TestClient(app)
    yield client
    reset_dependencies()


@pytest.fixture
def place_order(test_client):
    """POST a checkout request and return the created order."""

    def _place(**overrides):
        payload = {
            "customer_id": "customer-1",
            "branch_id": "branch-1",
            "items": [
                {"product": {"id": "combo-1", "name": "Combo Familiar", "price": "150.00"}, "quantity": 2}
            ],
        }
        payload.update(overrides)
        response = test_client.post("/api/v1/orders", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _place

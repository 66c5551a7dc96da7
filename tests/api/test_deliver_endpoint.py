"""
Test suite for the delivery endpoint.

System role: Verification of session hand-off HTTP contract
"""

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from finbot.api.deps import get_delivery_service
from finbot.api.routers.deliver import router as deliver_router
from finbot.core.exceptions import SessionNotFoundError
from finbot.models.delivery import DeliveryResult


@pytest.fixture
def mock_delivery_service():
    return AsyncMock()


@pytest.fixture
def client(mock_delivery_service):
    app = FastAPI()
    app.include_router(deliver_router)
    app.dependency_overrides[get_delivery_service] = lambda: mock_delivery_service
    return TestClient(app)


def test_deliver_to_outbox_omits_missing_id(client, mock_delivery_service):
    mock_delivery_service.deliver.return_value = DeliveryResult(
        ok=True,
        destination="/srv/outbox/1700000000000-delivery.txt",
        note="Written to outbox (no SMTP configured)",
    )

    response = client.post("/deliver", json={"sessionId": "s-1"})

    assert response.status_code == 200
    assert response.json() == {
        "ok": True,
        "destination": "/srv/outbox/1700000000000-delivery.txt",
        "note": "Written to outbox (no SMTP configured)",
    }
    mock_delivery_service.deliver.assert_awaited_once_with("s-1")


def test_deliver_transport_failure_is_reported_in_body(client, mock_delivery_service):
    mock_delivery_service.deliver.return_value = DeliveryResult(
        ok=False, destination="smtp:smtp.example.com", note="SMTP send failed: 535"
    )

    response = client.post("/deliver", json={"sessionId": "s-1"})

    assert response.status_code == 200
    assert response.json()["ok"] is False


def test_deliver_unknown_session(client, mock_delivery_service):
    mock_delivery_service.deliver.side_effect = SessionNotFoundError("missing")

    response = client.post("/deliver", json={"sessionId": "missing"})

    assert response.status_code == 404
    assert response.json() == {"detail": "Session not found"}


def test_deliver_requires_session_id(client):
    response = client.post("/deliver", json={})

    assert response.status_code == 422

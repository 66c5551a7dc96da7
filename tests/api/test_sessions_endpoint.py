"""
Test suite for the session lookup endpoint.

System role: Verification of session HTTP contract
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from finbot.api.deps import get_session_service
from finbot.api.routers.sessions import router as sessions_router
from finbot.core.exceptions import SessionNotFoundError
from finbot.core.profiling.profile import SessionProfile


@pytest.fixture
def mock_session_service():
    return AsyncMock()


@pytest.fixture
def client(mock_session_service):
    app = FastAPI()
    app.include_router(sessions_router)
    app.dependency_overrides[get_session_service] = lambda: mock_session_service
    return TestClient(app)


def test_get_session_returns_profile(client, mock_session_service):
    created = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)
    mock_session_service.lookup.return_value = SessionProfile(
        id="s-1", created_at=created, name="Ada", email="ada@example.com"
    )

    response = client.get("/session/s-1")

    assert response.status_code == 200
    assert response.json() == {
        "id": "s-1",
        "name": "Ada",
        "email": "ada@example.com",
        "income": None,
        "createdAt": 1709294400000,
    }
    mock_session_service.lookup.assert_awaited_once_with("s-1")


def test_get_session_not_found(client, mock_session_service):
    mock_session_service.lookup.side_effect = SessionNotFoundError("missing")

    response = client.get("/session/missing")

    assert response.status_code == 404
    assert response.json() == {"detail": "Session not found"}

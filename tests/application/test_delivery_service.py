"""
Test suite for DeliveryService.

System role: Verification of session hand-off formatting
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from finbot.application.services.delivery_service import (
    DeliveryService,
    delivery_body,
    delivery_subject,
)
from finbot.core.exceptions import SessionNotFoundError
from finbot.core.profiling.profile import SessionProfile
from finbot.models.delivery import DeliveryResult


@pytest.fixture
def profile() -> SessionProfile:
    return SessionProfile(
        id="abc-123",
        created_at=datetime(2024, 3, 1, 12, 30, 5, 250000, tzinfo=timezone.utc),
        name="Ada",
        income="$80k",
    )


class TestFormatting:
    """Test suite for subject and body rendering."""

    def test_subject(self, profile) -> None:
        assert delivery_subject(profile) == "FinancialBot Session abc-123"

    def test_body_should_list_fields_with_blank_unknowns(self, profile) -> None:
        assert delivery_body(profile) == (
            "Session: abc-123\n"
            "Created: 2024-03-01T12:30:05.250Z\n"
            "Name: Ada\n"
            "Email: \n"
            "Income: $80k"
        )


class TestDeliver:
    """Test suite for DeliveryService.deliver."""

    @pytest.mark.asyncio
    async def test_should_hand_formatted_profile_to_client(self, profile) -> None:
        # Arrange
        session_service = MagicMock()
        session_service.lookup = AsyncMock(return_value=profile)
        client = MagicMock()
        client.deliver = AsyncMock(
            return_value=DeliveryResult(ok=True, destination="/tmp/outbox/1-delivery.txt")
        )
        service = DeliveryService(session_service=session_service, client=client)

        # Act
        result = await service.deliver("abc-123")

        # Assert
        assert result.ok is True
        session_service.lookup.assert_awaited_once_with("abc-123")
        client.deliver.assert_awaited_once_with(delivery_subject(profile), delivery_body(profile))

    @pytest.mark.asyncio
    async def test_unknown_session_should_raise(self) -> None:
        session_service = MagicMock()
        session_service.lookup = AsyncMock(side_effect=SessionNotFoundError("nope"))
        client = MagicMock()
        client.deliver = AsyncMock()
        service = DeliveryService(session_service=session_service, client=client)

        with pytest.raises(SessionNotFoundError):
            await service.deliver("nope")
        client.deliver.assert_not_awaited()

"""
Delivery service.

Formats a session's collected profile as a plain-text message and hands it
to the delivery client.

Dependencies: finbot.boundary.delivery, finbot.application.services.session_service
System role: Session hand-off use case
"""

import logging

from finbot.application.services.session_service import SessionService
from finbot.boundary.delivery.delivery_client import DeliveryClient
from finbot.core.profiling.profile import SessionProfile
from finbot.models.delivery import DeliveryResult

logger = logging.getLogger(__name__)

SUBJECT_PREFIX = "FinancialBot Session"


def delivery_subject(profile: SessionProfile) -> str:
    return f"{SUBJECT_PREFIX} {profile.id}"


def delivery_body(profile: SessionProfile) -> str:
    """One ``Label: value`` line per field; unknown values are blank."""
    created = profile.created_at.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return "\n".join([
        f"Session: {profile.id}",
        f"Created: {created}",
        f"Name: {profile.name or ''}",
        f"Email: {profile.email or ''}",
        f"Income: {profile.income or ''}",
    ])


class DeliveryService:
    """Delivers a session's profile."""

    def __init__(self, session_service: SessionService, client: DeliveryClient) -> None:
        self.session_service = session_service
        self.client = client

    async def deliver(self, session_id: str) -> DeliveryResult:
        """
        Deliver the profile of an existing session.

        Raises:
            SessionNotFoundError: If session not found
        """
        profile = await self.session_service.lookup(session_id)
        result = await self.client.deliver(delivery_subject(profile), delivery_body(profile))
        logger.info(
            f"{__name__}:deliver - session_id={session_id} ok={result.ok} destination={result.destination}"
        )
        return result

"""
Profile tracker state machine.

Each field moves unknown -> known(value) and never back; asked_fields only
grows. The tracker picks at most one field to solicit per turn and only
when exactly one field is both missing and not yet asked.

Dependencies: finbot.core.profiling
System role: Progressive profiling decision policy
"""

import logging

from finbot.core.profiling.ask_classifier import AskClassifier
from finbot.core.profiling.profile import (
    PROFILE_FIELDS,
    ExtractionResult,
    ProfileField,
    SessionProfile,
)
from finbot.observability import log_with_context

logger = logging.getLogger(__name__)


class ProfileTracker:
    """Merges extractions, selects the soft-ask candidate, marks fields asked."""

    def __init__(self, ask_classifier: AskClassifier) -> None:
        """
        Initialize tracker.

        Args:
            ask_classifier: Decides whether a reply solicits a given field
        """
        self._ask_classifier = ask_classifier

    def merge(self, profile: SessionProfile, extraction: ExtractionResult) -> list[str]:
        """
        Apply extracted values to the profile.

        Present values overwrite prior ones regardless of asked-state;
        absent values leave the field untouched.

        Returns:
            list[str]: Fields whose value changed
        """
        changed = []
        for field, value in extraction.present().items():
            if getattr(profile, field) != value:
                setattr(profile, field, value)
                changed.append(field)
        if changed:
            log_with_context(
                logger,
                logging.INFO,
                f"{__name__}:merge - Profile updated",
                session_id=profile.id,
                fields=changed,
            )
        return changed

    def ask_candidates(self, profile: SessionProfile) -> list[ProfileField]:
        """Missing fields that have not been asked yet, in canonical order."""
        return [f for f in profile.missing() if f not in profile.asked_fields]

    def next_ask(self, profile: SessionProfile) -> ProfileField | None:
        """
        Decide the single field to solicit this turn.

        Returns:
            The field when exactly one candidate exists, otherwise None
        """
        candidates = self.ask_candidates(profile)
        if len(candidates) == 1:
            return candidates[0]
        return None

    def mark_asked(
        self,
        profile: SessionProfile,
        candidate: ProfileField | None,
        reply: str,
    ) -> bool:
        """
        Record that this turn's candidate was asked, if the reply asks for it.

        Args:
            profile: Session profile (mutated in place)
            candidate: Field selected by ``next_ask`` for this turn
            reply: Generated reply text

        Returns:
            bool: True when the field was added to asked_fields
        """
        if candidate is None or candidate not in PROFILE_FIELDS:
            return False
        if candidate in profile.asked_fields:
            return False
        if not self._ask_classifier.asks_for(candidate, reply):
            return False
        profile.asked_fields.add(candidate)
        logger.info(f"{__name__}:mark_asked - session_id={profile.id} field={candidate}")
        return True

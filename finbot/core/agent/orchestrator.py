"""
Conversational turn orchestrator.

Sequences one turn: resolve the session profile, extract profile fields and
retrieve knowledge concurrently, decide the soft ask, assemble the system
prompt, pick the temperature, generate, then record whether the reply asked
for the selected field.

Dependencies: langchain_core.messages, finbot.core.profiling, finbot.core.retrieval
System role: Per-turn pipeline for the profiling assistant
"""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from finbot.configs.retrieval import AnchorRule
from finbot.core.agent.persona import SYSTEM_PERSONA
from finbot.core.agent.prompt_builder import anchor_directives, build_system_prompt, render_turn
from finbot.core.agent.temperature import TemperaturePolicy
from finbot.core.profiling.extractor import FieldExtractor
from finbot.core.profiling.profile import ProfileField, SessionProfile
from finbot.core.profiling.tracker import ProfileTracker
from finbot.core.retrieval.retriever import HybridRetriever
from finbot.observability import log_with_context

logger = logging.getLogger(__name__)

EMPTY_REPLY = "..."


class ProfileStore(Protocol):
    """Durable storage for session profiles."""

    async def get_profile(self, session_id: str) -> SessionProfile | None: ...

    async def create_profile(self) -> SessionProfile: ...

    async def save_profile(self, profile: SessionProfile) -> None: ...


class ReplyGenerator(Protocol):
    async def generate(
        self,
        messages: Sequence[BaseMessage],
        temperature: float,
        json_mode: bool = False,
    ) -> str: ...


@dataclass
class TurnResult:
    """Outcome of one processed turn."""

    reply: str
    session_id: str
    profile: SessionProfile
    ask_field: ProfileField | None = None
    asked_marked: bool = False
    passages: list[str] = field(default_factory=list)
    temperature: float = 0.6


def latest_user_text(messages: Sequence[BaseMessage]) -> str | None:
    """Content of the last human message, or None when there is none."""
    for message in reversed(messages):
        if isinstance(message, HumanMessage):
            return message.content if isinstance(message.content, str) else None
    return None


class TurnOrchestrator:
    """Runs the extraction, retrieval and generation pipeline for a turn."""

    def __init__(
        self,
        store: ProfileStore,
        extractor: FieldExtractor,
        tracker: ProfileTracker,
        retriever: HybridRetriever,
        generator: ReplyGenerator,
        temperature_policy: TemperaturePolicy,
        persona: str = SYSTEM_PERSONA,
        anchor_rules: Sequence[AnchorRule] = (),
    ) -> None:
        self._store = store
        self._extractor = extractor
        self._tracker = tracker
        self._retriever = retriever
        self._generator = generator
        self._temperature_policy = temperature_policy
        self._persona = persona
        self._anchor_rules = list(anchor_rules)

    async def resolve_profile(self, session_id: str | None) -> SessionProfile:
        """Load the session's profile, or start a fresh session for absent/unknown ids."""
        if session_id:
            profile = await self._store.get_profile(session_id)
            if profile is not None:
                return profile
            logger.info(f"{__name__}:resolve_profile - Unknown session_id={session_id}, creating new session")
        return await self._store.create_profile()

    async def process_turn(
        self,
        messages: Sequence[BaseMessage],
        session_id: str | None = None,
    ) -> TurnResult:
        """
        Process one conversational turn.

        Args:
            messages: Conversation so far, oldest first; system messages are ignored
            session_id: Existing session id, if the client has one

        Returns:
            TurnResult: Reply text, session id and the updated profile

        Raises:
            ConfigurationError: Generation credentials missing
            GenerationTimeoutError: Generation exceeded its timeout
            GenerationError: Generation failed
        """
        profile = await self.resolve_profile(session_id)
        history = [m for m in messages if not isinstance(m, SystemMessage)]
        query = latest_user_text(history)

        passages: list[str] = []
        if query and query.strip():
            extraction, passages = await asyncio.gather(
                self._extractor.extract_fields(query),
                self._retriever.retrieve_safely(query),
            )
            if self._tracker.merge(profile, extraction):
                await self._store.save_profile(profile)

        ask_field = self._tracker.next_ask(profile)
        directives = anchor_directives(query, self._anchor_rules) if query and passages else []
        system_prompt = build_system_prompt(
            self._persona,
            profile,
            ask_field=ask_field,
            passages=passages,
            directives=directives,
        )
        temperature = self._temperature_policy.select(query or "", bool(passages))

        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:process_turn - Generating reply",
            session_id=profile.id,
            passages=len(passages),
            ask_field=ask_field,
            temperature=temperature,
        )
        reply = await self._generator.generate(render_turn(system_prompt, history), temperature=temperature)
        if not reply or not reply.strip():
            reply = EMPTY_REPLY

        asked_marked = self._tracker.mark_asked(profile, ask_field, reply)
        if asked_marked:
            await self._store.save_profile(profile)

        return TurnResult(
            reply=reply,
            session_id=profile.id,
            profile=profile,
            ask_field=ask_field,
            asked_marked=asked_marked,
            passages=passages,
            temperature=temperature,
        )

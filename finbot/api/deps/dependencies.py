"""
Dependency injection container.

Process-wide components (corpus index, query cache, model clients) live in
a lazily populated ServiceCache; request-scoped services are assembled
per request around the request's database session.

Dependencies: fastapi, finbot.configs, finbot.application, finbot.boundary, finbot.core
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from finbot.application.services import ChatService, DeliveryService, SessionService
from finbot.boundary.db import get_async_db
from finbot.configs import Settings, get_settings


class ServiceCache:
    """Container for cached process-wide instances."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._embedding_client = None
        self._generation_client = None
        self._corpus_index = None
        self._query_cache = None
        self._retriever = None
        self._extractor = None
        self._tracker = None
        self._temperature_policy = None
        self._delivery_client = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def embedding_client(self):
        """Get cached embedding client (model is built on first embed)."""
        if self._embedding_client is None:
            from finbot.boundary.llm import EmbeddingClient, build_gemini_embeddings

            llm = self.settings.llm
            self._embedding_client = EmbeddingClient(
                embeddings_factory=lambda: build_gemini_embeddings(llm),
                timeout_seconds=llm.request_timeout_seconds,
            )
        return self._embedding_client

    @property
    def generation_client(self):
        """Get cached generation client (models are built on first call)."""
        if self._generation_client is None:
            from finbot.boundary.llm import build_gemini_generation_client

            self._generation_client = build_gemini_generation_client(self.settings.llm)
        return self._generation_client

    @property
    def corpus_index(self):
        """Get cached corpus index (built on first retrieval)."""
        if self._corpus_index is None:
            from finbot.core.retrieval import CorpusIndex

            retrieval = self.settings.retrieval
            self._corpus_index = CorpusIndex(
                embedder=self.embedding_client,
                source_path=retrieval.knowledge_file,
                chunk_size=retrieval.chunk_size,
                overlap=retrieval.chunk_overlap,
            )
        return self._corpus_index

    @property
    def query_cache(self):
        """Get cached query embedding LRU."""
        if self._query_cache is None:
            from finbot.core.retrieval import QueryEmbeddingCache

            self._query_cache = QueryEmbeddingCache(max_size=self.settings.retrieval.query_cache_size)
        return self._query_cache

    @property
    def retriever(self):
        """Get cached hybrid retriever."""
        if self._retriever is None:
            from finbot.core.retrieval import HybridRetriever

            retrieval = self.settings.retrieval
            self._retriever = HybridRetriever(
                index=self.corpus_index,
                embedder=self.embedding_client,
                cache=self.query_cache,
                anchor_rules=retrieval.anchor_rules,
                top_k=retrieval.top_k,
                min_similarity=retrieval.min_similarity,
            )
        return self._retriever

    @property
    def extractor(self):
        """Get cached field extractor."""
        if self._extractor is None:
            from finbot.core.profiling import FieldExtractor

            self._extractor = FieldExtractor(
                generator=self.generation_client,
                temperature=self.settings.llm.extraction_temperature,
            )
        return self._extractor

    @property
    def tracker(self):
        """Get cached profile tracker."""
        if self._tracker is None:
            from finbot.core.profiling import KeywordAskClassifier, ProfileTracker

            classifier = KeywordAskClassifier(self.settings.profiling.indicator_map())
            self._tracker = ProfileTracker(ask_classifier=classifier)
        return self._tracker

    @property
    def temperature_policy(self):
        """Get cached temperature policy."""
        if self._temperature_policy is None:
            from finbot.core.agent import TemperaturePolicy

            retrieval = self.settings.retrieval
            self._temperature_policy = TemperaturePolicy(
                default=retrieval.default_temperature,
                with_context=retrieval.context_temperature,
                exact=retrieval.exact_temperature,
                exact_phrases=retrieval.exact_phrases,
            )
        return self._temperature_policy

    @property
    def delivery_client(self):
        """Get cached delivery client."""
        if self._delivery_client is None:
            from finbot.boundary.delivery import DeliveryClient

            self._delivery_client = DeliveryClient(
                settings=self.settings.delivery,
                timeout_seconds=self.settings.llm.request_timeout_seconds,
            )
        return self._delivery_client

    def build_orchestrator(self, store):
        """Turn pipeline bound to a request-scoped profile store."""
        from finbot.core.agent import TurnOrchestrator

        return TurnOrchestrator(
            store=store,
            extractor=self.extractor,
            tracker=self.tracker,
            retriever=self.retriever,
            generator=self.generation_client,
            temperature_policy=self.temperature_policy,
            anchor_rules=self.settings.retrieval.anchor_rules,
        )

    def warm(self) -> None:
        """Instantiate every component; no network calls are made."""
        _ = self.retriever
        _ = self.extractor
        _ = self.tracker
        _ = self.temperature_policy
        _ = self.delivery_client

    def clear(self) -> None:
        """Clear all cached instances."""
        self._embedding_client = None
        self._generation_client = None
        self._corpus_index = None
        self._query_cache = None
        self._retriever = None
        self._extractor = None
        self._tracker = None
        self._temperature_policy = None
        self._delivery_client = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_session_service(db: AsyncSession = Depends(get_async_db)) -> SessionService:
    """
    Get session service instance.

    Args:
        db: Async database session (injected via Depends)
    """
    return SessionService(db=db)


def get_chat_service(
    session_service: SessionService = Depends(get_session_service),
    cache: ServiceCache = Depends(get_service_cache),
) -> ChatService:
    """
    Get chat service instance.

    Args:
        session_service: Request-scoped profile store (injected)
        cache: Process-wide components (injected)
    """
    return ChatService(orchestrator=cache.build_orchestrator(session_service))


def get_delivery_service(
    session_service: SessionService = Depends(get_session_service),
    cache: ServiceCache = Depends(get_service_cache),
) -> DeliveryService:
    """Get delivery service instance."""
    return DeliveryService(session_service=session_service, client=cache.delivery_client)

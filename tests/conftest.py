"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory async database, fake embedding model, scripted
generation client, factories for custom fakes
Dependencies: pytest, sqlalchemy, langchain_core
System role: Test infrastructure and fixture management
"""

import re
import uuid
from collections.abc import Sequence

import pytest
from langchain_core.embeddings import Embeddings
from langchain_core.messages import BaseMessage

VOCABULARY = (
    "earnings",
    "revenue",
    "margin",
    "inflation",
    "rates",
    "fed",
    "options",
    "volatility",
    "insider",
    "information",
    "dividend",
    "risk",
)


class KeywordEmbeddings(Embeddings):
    """Bag-of-keywords embeddings: one dimension per vocabulary word."""

    def __init__(self, vocabulary: Sequence[str] = VOCABULARY) -> None:
        self.vocabulary = tuple(vocabulary)
        self.document_calls: list[list[str]] = []

    def _vector(self, text: str) -> list[float]:
        words = re.findall(r"[a-z]+", text.lower())
        return [float(words.count(term)) for term in self.vocabulary]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        self.document_calls.append(list(texts))
        return [self._vector(t) for t in texts]

    def embed_query(self, text: str) -> list[float]:
        return self._vector(text)


class FakeEmbedder:
    """Async embedding collaborator over KeywordEmbeddings with call counting."""

    def __init__(self, model: KeywordEmbeddings | None = None) -> None:
        self.model = model or KeywordEmbeddings()
        self.calls: list[list[str]] = []

    async def embed(self, texts: Sequence[str]) -> list[list[float]]:
        self.calls.append(list(texts))
        return self.model.embed_documents(list(texts))


class ScriptedGenerator:
    """Generation collaborator returning queued replies and recording calls."""

    def __init__(self, replies: Sequence[str] = (), default: str = "Noted.") -> None:
        self.replies = list(replies)
        self.default = default
        self.calls: list[dict] = []

    async def generate(
        self,
        messages: Sequence[BaseMessage],
        temperature: float,
        json_mode: bool = False,
    ) -> str:
        self.calls.append(
            {"messages": list(messages), "temperature": temperature, "json_mode": json_mode}
        )
        if self.replies:
            return self.replies.pop(0)
        return self.default


@pytest.fixture
def keyword_embeddings() -> KeywordEmbeddings:
    return KeywordEmbeddings()


@pytest.fixture
def fake_embedder() -> FakeEmbedder:
    return FakeEmbedder()


@pytest.fixture
def scripted_generator() -> ScriptedGenerator:
    return ScriptedGenerator()


@pytest.fixture
def make_generator():
    """Factory for ScriptedGenerator with custom replies."""
    return ScriptedGenerator


@pytest.fixture
def make_embeddings():
    """Factory for KeywordEmbeddings with a custom vocabulary."""
    return KeywordEmbeddings


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from finbot.boundary.db.base import Base
    from finbot.boundary.db import models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_id() -> str:
    """Generate a test session ID."""
    return str(uuid.uuid4())

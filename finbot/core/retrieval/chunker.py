"""
Word-window chunker.

Dependencies: pydantic
System role: Splits the knowledge source into overlapping chunks
"""

from pydantic import BaseModel, ConfigDict, Field

from finbot.core.exceptions import ValidationError


class Chunk(BaseModel):
    """Indexed knowledge chunk. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Positional chunk identifier (c0, c1, ...)")
    text: str = Field(description="Chunk text content")
    embedding: tuple[float, ...] = Field(description="Embedding vector")


def split_into_chunks(text: str, chunk_size: int = 1000, overlap: int = 200) -> list[str]:
    """
    Split text into windows of ``chunk_size`` words advancing by
    ``chunk_size - overlap`` words.

    The last window may be shorter. Splitting stops at the first window
    that reaches the end of the text.

    Args:
        text: Source text (tokenized on whitespace)
        chunk_size: Words per window
        overlap: Words shared by consecutive windows

    Returns:
        list[str]: Chunk texts with words joined by single spaces

    Raises:
        ValidationError: If the window parameters cannot advance
    """
    if chunk_size <= 0:
        raise ValidationError("chunk_size must be positive", field="chunk_size")
    if overlap < 0 or overlap >= chunk_size:
        raise ValidationError("overlap must be in [0, chunk_size)", field="overlap")

    words = text.split()
    chunks: list[str] = []
    start = 0
    while start < len(words):
        end = min(len(words), start + chunk_size)
        chunks.append(" ".join(words[start:end]))
        if end == len(words):
            break
        start = end - overlap
    return chunks

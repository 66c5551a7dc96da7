"""
Profile field extractor.

Fast path: ordered (pattern, handler) rules per field, first match wins.
Slow path: when the fast path finds nothing, ask the generation
collaborator for a JSON object. Extraction never raises to the caller.

Dependencies: re, json, langchain_core.prompts
System role: Per-turn structured field extraction
"""

import json
import logging
import re
from collections.abc import Callable, Sequence
from typing import Protocol

from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate

from finbot.core.exceptions import ExtractionError
from finbot.core.profiling.profile import PROFILE_FIELDS, ExtractionResult
from finbot.observability import log_exception_with_context

logger = logging.getLogger(__name__)

Handler = Callable[[re.Match[str]], str | None]
ExtractionRule = tuple[re.Pattern[str], Handler]


class JSONGenerator(Protocol):
    """Generation collaborator in constrained (JSON-only) mode."""

    async def generate(
        self,
        messages: Sequence[BaseMessage],
        temperature: float,
        json_mode: bool = False,
    ) -> str: ...


def _whole(match: re.Match[str]) -> str:
    return match.group(0).strip()


def _group(index: int) -> Handler:
    def handler(match: re.Match[str]) -> str | None:
        value = match.group(index)
        return value.strip() if value else None

    return handler


EMAIL_RULES: list[ExtractionRule] = [
    (re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE), _whole),
]

INCOME_RULES: list[ExtractionRule] = [
    # "$50k", "120 thousand"
    (re.compile(r"\$?\d{1,3}[,\d]*\s*(?:k|thousand)\b", re.IGNORECASE), _whole),
    # "I earn about 60,000" -> the amount, keyword within the same clause
    (
        re.compile(
            r"\b(?:income|make|earn|salary|budget)\b[^.;!?\n]*?(\$?\d[\d,]*(?:\s*(?:k|thousand)\b)?)",
            re.IGNORECASE,
        ),
        _group(1),
    ),
    (re.compile(r"\$?\b\d{2,6}\b"), _whole),
]

_NAME = r"([A-Z][a-zA-Z]+(?:\s+[A-Z][a-zA-Z]+)*)"

NAME_RULES: list[ExtractionRule] = [
    (re.compile(r"(?i:\b(?:I\s*am|I['’]m|name\s*is|call\s*me|it['’]s))\s+" + _NAME + r"\b"), _group(1)),
    (re.compile(r"(?i:\b(?:hi|hey|hello)),?\s*(?i:I['’]m)\s+([A-Z][a-zA-Z]+)\b"), _group(1)),
    (re.compile(r"\b([A-Z][a-zA-Z]+)\s+(?i:here)\b"), _group(1)),
]

EXTRACTION_SYSTEM_PROMPT = "You are a JSON extraction tool. Return only valid JSON objects."

EXTRACTION_USER_PROMPT = """Extract the full name, email and income level of the user from the following user message. Return ONLY a JSON object with any of these fields if found: name, email, income. If a field is not found, omit it. Be flexible - names can be first names, nicknames, or full names. Income can be mentioned in various ways (e.g., "$50k", "50k", "fifty thousand"). Email should be a valid email format.

User message: "{message}"

Return JSON only, no other text:"""

EXTRACTION_PROMPT = ChatPromptTemplate.from_messages([
    ("system", EXTRACTION_SYSTEM_PROMPT),
    ("human", EXTRACTION_USER_PROMPT),
])


def apply_rules(text: str, rules: Sequence[ExtractionRule]) -> str | None:
    """Return the first handler result whose pattern matches, in list order."""
    for pattern, handler in rules:
        match = pattern.search(text)
        if match:
            value = handler(match)
            if value:
                return value
    return None


def mask_emails(text: str) -> str:
    """Blank out email addresses so their digits are not read as income."""
    for pattern, _ in EMAIL_RULES:
        text = pattern.sub(" ", text)
    return text


def extract_with_patterns(text: str) -> ExtractionResult:
    """Deterministic fast-path extraction."""
    text = text or ""
    masked = mask_emails(text)
    return ExtractionResult(
        name=apply_rules(text, NAME_RULES),
        email=apply_rules(text, EMAIL_RULES),
        income=apply_rules(masked, INCOME_RULES),
    )


def parse_extraction_json(raw: str) -> ExtractionResult:
    """
    Parse the model's JSON reply into an ExtractionResult.

    Raises:
        ExtractionError: Reply is not a JSON object
    """
    try:
        data = json.loads(raw)
    except (TypeError, json.JSONDecodeError) as e:
        raise ExtractionError("Extraction reply is not valid JSON", {"raw": str(raw)[:200]}) from e
    if not isinstance(data, dict):
        raise ExtractionError("Extraction reply is not a JSON object", {"type": type(data).__name__})
    values = {}
    for f in PROFILE_FIELDS:
        value = data.get(f)
        # models sometimes answer income as a bare number
        if isinstance(value, (str, int, float)) and not isinstance(value, bool):
            values[f] = value
    return ExtractionResult(**values)


class FieldExtractor:
    """Two-stage extractor: regex rules, then constrained model fallback."""

    def __init__(self, generator: JSONGenerator | None = None, temperature: float = 0.1) -> None:
        """
        Initialize extractor.

        Args:
            generator: Generation collaborator for the fallback (None disables it)
            temperature: Sampling temperature for the fallback call
        """
        self._generator = generator
        self._temperature = temperature

    async def extract_fields(self, text: str) -> ExtractionResult:
        """
        Extract profile fields from one user utterance.

        Never raises: fallback failures degrade to the fast-path result.
        """
        fast = extract_with_patterns(text)
        if not fast.is_empty() or self._generator is None or not (text or "").strip():
            return fast

        logger.info(f"{__name__}:extract_fields - Fast path empty, using model fallback")
        try:
            raw = await self._generator.generate(
                EXTRACTION_PROMPT.format_messages(message=text),
                temperature=self._temperature,
                json_mode=True,
            )
            return parse_extraction_json(raw)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:extract_fields - Fallback extraction failed",
                e,
            )
            return fast

"""
Generation collaborator.

Sends LangChain message lists to Gemini at a caller-chosen temperature,
optionally constrained to JSON output, with a request-scoped timeout.

Dependencies: langchain_google_genai, langchain_core
System role: Chat completion adapter
"""

import asyncio
import logging
from collections.abc import Callable, Sequence

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from finbot.configs.llm import LLMSettings
from finbot.core.exceptions import (
    ConfigurationError,
    GenerationError,
    GenerationTimeoutError,
)

logger = logging.getLogger(__name__)

ModelFactory = Callable[[float, bool], BaseChatModel]


def message_text(message: BaseMessage) -> str:
    """Flatten string or content-block message content to plain text."""
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for item in content:
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, dict):
            parts.append(str(item.get("text", "")))
    return "".join(parts)


class GenerationClient:
    """Temperature-parameterized chat completion with per-call timeout."""

    def __init__(self, model_factory: ModelFactory, model_name: str, timeout_seconds: float = 30.0) -> None:
        """
        Initialize client.

        Args:
            model_factory: Builds a chat model for (temperature, json_mode)
            model_name: Model identifier, for errors and logs
            timeout_seconds: Upper bound for one generation call
        """
        self._factory = model_factory
        self._model_name = model_name
        self._timeout = timeout_seconds
        self._models: dict[tuple[float, bool], BaseChatModel] = {}

    def _model(self, temperature: float, json_mode: bool) -> BaseChatModel:
        key = (temperature, json_mode)
        if key not in self._models:
            self._models[key] = self._factory(temperature, json_mode)
        return self._models[key]

    async def generate(
        self,
        messages: Sequence[BaseMessage],
        temperature: float,
        json_mode: bool = False,
    ) -> str:
        """
        Generate a completion.

        Args:
            messages: System/human/AI messages, system first
            temperature: Sampling temperature
            json_mode: Constrain the response to a JSON object

        Returns:
            str: Completion text

        Raises:
            ConfigurationError: Credentials missing
            GenerationTimeoutError: Call exceeded the timeout
            GenerationError: Any other provider failure
        """
        model = self._model(temperature, json_mode)
        logger.info(
            f"{__name__}:generate - model={self._model_name} temperature={temperature} "
            f"json_mode={json_mode} messages={len(messages)}"
        )
        try:
            result = await asyncio.wait_for(model.ainvoke(list(messages)), timeout=self._timeout)
        except asyncio.TimeoutError as e:
            raise GenerationTimeoutError(
                f"Generation timed out after {self._timeout}s", model=self._model_name
            ) from e
        except Exception as e:
            logger.error(f"{__name__}:generate - {type(e).__name__}: {e}")
            raise GenerationError(f"Generation failed: {e}", model=self._model_name) from e
        return message_text(result)


def gemini_model_factory(settings: LLMSettings) -> ModelFactory:
    """Return a factory building ChatGoogleGenerativeAI models from settings."""

    def build(temperature: float, json_mode: bool) -> BaseChatModel:
        if not settings.google_api_key:
            raise ConfigurationError("GOOGLE_API_KEY is not set", setting="GOOGLE_API_KEY")
        kwargs = {"response_mime_type": "application/json"} if json_mode else {}
        return ChatGoogleGenerativeAI(
            model=settings.chat_model,
            temperature=temperature,
            google_api_key=settings.google_api_key,
            **kwargs,
        )

    return build


def build_gemini_generation_client(settings: LLMSettings) -> GenerationClient:
    """Build the Gemini-backed generation client."""
    return GenerationClient(
        model_factory=gemini_model_factory(settings),
        model_name=settings.chat_model,
        timeout_seconds=settings.request_timeout_seconds,
    )

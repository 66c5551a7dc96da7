"""
Chat message adapter.

Converts API chat messages into LangChain messages for the turn pipeline.
Client-supplied system messages are dropped; the server owns the system
prompt.

Dependencies: langchain_core.messages, finbot.models.chat
System role: API-to-domain message conversion
"""

from collections.abc import Iterable

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage

from finbot.models.chat import ChatMessage


def to_langchain_messages(messages: Iterable[ChatMessage]) -> list[BaseMessage]:
    """
    Convert API messages to LangChain messages, preserving order.

    Args:
        messages: Messages with role 'system', 'user' or 'assistant'

    Returns:
        list[BaseMessage]: HumanMessage/AIMessage list without system entries
    """
    converted: list[BaseMessage] = []
    for message in messages:
        if message.role == "user":
            converted.append(HumanMessage(content=message.content))
        elif message.role == "assistant":
            converted.append(AIMessage(content=message.content))
    return converted

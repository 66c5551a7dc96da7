from finbot.application.adapters.message_adapter import to_langchain_messages

__all__ = ["to_langchain_messages"]

"""AI assistant: chat and structured quotation drafting."""
from studiodesk.assistant.engine import (
    CHAT_FALLBACK_MESSAGE,
    QUOTATION_SCHEMA,
    AIAssistant,
    AIQuotationDraft,
    AIServiceError,
    CompletionClient,
    OpenAICompletionClient,
)
from studiodesk.assistant.session import ChatMessage, ChatSession

__all__ = [
    "CHAT_FALLBACK_MESSAGE",
    "QUOTATION_SCHEMA",
    "AIAssistant",
    "AIQuotationDraft",
    "AIServiceError",
    "ChatMessage",
    "ChatSession",
    "CompletionClient",
    "OpenAICompletionClient",
]

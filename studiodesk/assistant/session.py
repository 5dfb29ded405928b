"""Chat transcript kept by the assistant panel."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from studiodesk.assistant.engine import AIAssistant

logger = logging.getLogger(__name__)

GREETING = "Greeting initialized. I am the studio AI assistant. How shall we optimize your agency today?"


@dataclass
class ChatMessage:
    role: str
    content: str


class ChatSession:
    """Holds the chat transcript and allows one prompt in flight at a time."""

    def __init__(self, assistant: AIAssistant) -> None:
        self.assistant = assistant
        self.messages: List[ChatMessage] = [ChatMessage("assistant", GREETING)]
        self.busy = False

    def send(self, prompt: str) -> Optional[str]:
        """Send a prompt and record both sides; blank prompts are ignored."""

        text = prompt.strip()
        if not text:
            return None
        if self.busy:
            raise RuntimeError("Wait for the current reply before sending another prompt")

        self.messages.append(ChatMessage("user", text))
        self.busy = True
        try:
            reply = self.assistant.chat(text)
        finally:
            self.busy = False
        self.messages.append(ChatMessage("assistant", reply))
        return reply

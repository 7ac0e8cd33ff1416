"""
agent.memory - Per-session conversation memory.

Stores messages as a plain list[BaseMessage]. The list is append-only:
a completed turn appends its messages, a failed turn appends nothing.
"""

from __future__ import annotations

import logging
from typing import Iterable

from langchain_core.messages import BaseMessage

logger = logging.getLogger(__name__)


class ConversationMemory:
    """Per-session conversation memory.

    NOT global: each session gets its own instance. Never trimmed, so a
    tool result always stays next to the assistant turn that requested it.
    """

    def __init__(self):
        self._messages: list[BaseMessage] = []

    @property
    def messages(self) -> list[BaseMessage]:
        """Snapshot of the current history."""
        return list(self._messages)

    def extend(self, messages: Iterable[BaseMessage]) -> None:
        new = list(messages)
        self._messages.extend(new)
        logger.debug("Conversation memory now holds %d message(s)", len(self._messages))

    def clear(self) -> None:
        """Clear all conversation history."""
        self._messages.clear()

    def __len__(self) -> int:
        return len(self._messages)

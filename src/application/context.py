"""
application.context - Request-scoped session context.

Every function receives its context explicitly. Two concurrent sessions
get two different SessionContext instances; nothing is shared.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import uuid4


@dataclass
class SessionContext:
    """Per-session context passed through the agent layers.

    Attributes:
        conversation_id:  Unique per conversation session.
        request_id:       Unique per user turn, for tracing/logging.
    """
    conversation_id: str = field(default_factory=lambda: uuid4().hex)
    request_id: str = field(default_factory=lambda: uuid4().hex)

    def new_request(self) -> None:
        """Start a new user turn within the same session."""
        self.request_id = uuid4().hex

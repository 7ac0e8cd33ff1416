"""
application.dto - Data Transfer Objects returned to adapters.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from langchain_core.messages import BaseMessage


@dataclass(frozen=True)
class AgentRunResult:
    """Outcome of one user turn through the agent loop.

    output:     Final natural-language answer.
    messages:   Messages appended to the conversation during this turn
                (user message, assistant turns, tool results).
    tool_calls: Number of action requests executed during the turn.
    """
    output: str
    messages: list[BaseMessage] = field(default_factory=list)
    tool_calls: int = 0

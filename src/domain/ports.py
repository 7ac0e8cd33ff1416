"""
domain.ports - Abstract interfaces (Protocols) for all system boundaries.

These define WHAT the agent needs without specifying HOW. Infrastructure
modules provide concrete implementations; tests provide scripted fakes.

Using typing.Protocol (structural typing) instead of ABC — any class that
implements the methods satisfies the port without explicit inheritance.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from langchain_core.messages import AIMessage, BaseMessage
from langchain_core.tools import BaseTool as LangChainTool

from domain.models import ItemStatus


# ---------------------------------------------------------------------------
# Model boundary
# ---------------------------------------------------------------------------

@runtime_checkable
class ChatModelPort(Protocol):
    """Ask the language model for the next step.

    Returns an AIMessage that either carries ``tool_calls`` (action
    requests) or plain content (the final answer).
    """

    async def invoke(
        self,
        directive: str,
        history: Sequence[BaseMessage],
        tools: Sequence[LangChainTool],
    ) -> AIMessage: ...


# ---------------------------------------------------------------------------
# Remote workflow store boundary
# ---------------------------------------------------------------------------

@runtime_checkable
class WorkflowStorePort(Protocol):
    """CRUD-style access to workflow items.

    Every method returns the store's response as serialized JSON text and
    raises WorkflowStoreError on transport or non-success failures.
    """

    async def create_item(
        self, status: ItemStatus, title: str, description: str,
    ) -> str: ...

    async def list_items(self, status: ItemStatus) -> str: ...

    async def move_items(
        self, item_ids: list[str], target: ItemStatus,
    ) -> str: ...

    async def clear_items(self, status: ItemStatus) -> str: ...

"""
agent.tools.clear_items - Delete every item in one list.

Irreversible. Only the named list is cleared; the other is never touched.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from application.context import SessionContext
from agent.tools.base import BaseTool, StrictToolInput, ToolResult
from domain.models import ItemStatus, Operation
from domain.ports import WorkflowStorePort


class ClearItemsInput(StrictToolInput):
    """Input schema for the clear_items tool."""
    type: Literal["pending", "completed"] = Field(
        description="Type of items to clear",
    )


class ClearItemsTool(BaseTool):
    """Bulk-delete all pending or all completed items."""

    name = Operation.CLEAR_ITEMS
    description = (
        "Clear all items of a specific type (pending or completed). "
        "This cannot be undone; confirm with the user first."
    )

    def __init__(self, store: WorkflowStorePort):
        self._store = store

    def get_schema(self) -> type[BaseModel]:
        return ClearItemsInput

    async def execute(self, ctx: SessionContext, type: str = "", **kwargs) -> ToolResult:
        response = await self._store.clear_items(ItemStatus(type))
        return ToolResult.from_response(response)

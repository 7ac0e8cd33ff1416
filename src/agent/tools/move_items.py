"""
agent.tools.move_items - Move items between the pending and completed lists.

The store addresses the move by the list the items currently live in, which
is taken to be the opposite of the target list.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from application.context import SessionContext
from agent.tools.base import BaseTool, StrictToolInput, ToolResult
from domain.models import ItemStatus, Operation
from domain.ports import WorkflowStorePort


class MoveItemsInput(StrictToolInput):
    """Input schema for the move_items tool."""
    itemIds: list[str] = Field(
        min_length=1,
        description="Array of item IDs to move",
    )
    targetType: Literal["pending", "completed"] = Field(
        description="Where to move the items",
    )

    @field_validator("itemIds")
    @classmethod
    def _unique_ids(cls, value: list[str]) -> list[str]:
        if len(set(value)) != len(value):
            raise ValueError("item IDs must be unique")
        return value


class MoveItemsTool(BaseTool):
    """Mark tasks as done, or reopen finished ones."""

    name = Operation.MOVE_ITEMS
    description = (
        "Move items between pending and completed states. "
        "Requires itemIds (array of IDs) and targetType ('pending' or 'completed')."
    )

    def __init__(self, store: WorkflowStorePort):
        self._store = store

    def get_schema(self) -> type[BaseModel]:
        return MoveItemsInput

    async def execute(
        self,
        ctx: SessionContext,
        itemIds: list[str] | None = None,
        targetType: str = "",
        **kwargs,
    ) -> ToolResult:
        response = await self._store.move_items(list(itemIds or []), ItemStatus(targetType))
        return ToolResult.from_response(response)

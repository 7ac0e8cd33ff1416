"""
agent.tools.add_item - Create a workflow item in the pending or completed list.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from application.context import SessionContext
from agent.tools.base import BaseTool, StrictToolInput, ToolResult
from domain.models import ItemStatus, Operation
from domain.ports import WorkflowStorePort


class AddItemInput(StrictToolInput):
    """Input schema for add_pending_item / add_completed_item."""
    title: str = Field(description="Title of the workflow item")
    description: str = Field(description="Description of the workflow item")


class _AddItemTool(BaseTool):
    """Shared implementation; subclasses fix the status."""

    status: ItemStatus

    def __init__(self, store: WorkflowStorePort):
        self._store = store

    def get_schema(self) -> type[BaseModel]:
        return AddItemInput

    async def execute(
        self,
        ctx: SessionContext,
        title: str = "",
        description: str = "",
        **kwargs,
    ) -> ToolResult:
        response = await self._store.create_item(self.status, title, description)
        return ToolResult.from_response(response)


class AddPendingItemTool(_AddItemTool):
    """Create a task that still needs to be done."""

    name = Operation.ADD_PENDING_ITEM
    status = ItemStatus.PENDING
    description = (
        "Add a new pending workflow item (a to-do task). "
        "Requires both a title and a description."
    )


class AddCompletedItemTool(_AddItemTool):
    """Record a task that is already done."""

    name = Operation.ADD_COMPLETED_ITEM
    status = ItemStatus.COMPLETED
    description = (
        "Add a new completed workflow item (a task that is already done). "
        "Requires both a title and a description."
    )

"""
agent.tools.get_items - List the pending or completed workflow items.

No caching: every call goes to the store.
"""

from __future__ import annotations

from pydantic import BaseModel

from application.context import SessionContext
from agent.tools.base import BaseTool, StrictToolInput, ToolResult
from domain.models import ItemStatus, Operation
from domain.ports import WorkflowStorePort


class GetItemsInput(StrictToolInput):
    """The list operations take no arguments."""


class _GetItemsTool(BaseTool):
    status: ItemStatus

    def __init__(self, store: WorkflowStorePort):
        self._store = store

    def get_schema(self) -> type[BaseModel]:
        return GetItemsInput

    async def execute(self, ctx: SessionContext, **kwargs) -> ToolResult:
        response = await self._store.list_items(self.status)
        return ToolResult.from_response(response)


class GetPendingItemsTool(_GetItemsTool):
    name = Operation.GET_PENDING_ITEMS
    status = ItemStatus.PENDING
    description = (
        "Get all pending workflow items (to-do tasks), including their IDs."
    )


class GetCompletedItemsTool(_GetItemsTool):
    name = Operation.GET_COMPLETED_ITEMS
    status = ItemStatus.COMPLETED
    description = (
        "Get all completed workflow items (finished tasks), including their IDs."
    )

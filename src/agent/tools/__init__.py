"""
agent.tools - The fixed catalogue of workflow operations.
"""

from __future__ import annotations

from agent.tools.add_item import AddCompletedItemTool, AddPendingItemTool
from agent.tools.clear_items import ClearItemsTool
from agent.tools.get_items import GetCompletedItemsTool, GetPendingItemsTool
from agent.tools.move_items import MoveItemsTool
from agent.tools.registry import ToolRegistry
from domain.ports import WorkflowStorePort


def build_workflow_registry(store: WorkflowStorePort) -> ToolRegistry:
    """Register all six workflow operations against one store."""
    registry = ToolRegistry()
    registry.register(AddPendingItemTool(store))
    registry.register(AddCompletedItemTool(store))
    registry.register(GetPendingItemsTool(store))
    registry.register(GetCompletedItemsTool(store))
    registry.register(MoveItemsTool(store))
    registry.register(ClearItemsTool(store))
    return registry

"""
domain.models - Value objects for the workflow task agent.

Immutable data containers with no business logic and no dependencies on
infrastructure (no LangChain, no requests, no LangGraph).
"""

from __future__ import annotations

from enum import Enum


# ---------------------------------------------------------------------------
# Workflow item status
# ---------------------------------------------------------------------------

class ItemStatus(str, Enum):
    """Status of a workflow item in the remote store.

    The value doubles as the path segment under the store's base URL
    (``/pending`` and ``/completed``).
    """
    PENDING = "pending"
    COMPLETED = "completed"

    def opposite(self) -> ItemStatus:
        """Return the other status.

        Only valid while the store knows exactly two statuses: moving items
        infers the source list from the target this way.
        """
        if self is ItemStatus.PENDING:
            return ItemStatus.COMPLETED
        return ItemStatus.PENDING


# ---------------------------------------------------------------------------
# Operation catalogue
# ---------------------------------------------------------------------------

class Operation(str, Enum):
    """The fixed set of operations the model may request."""
    ADD_PENDING_ITEM = "add_pending_item"
    ADD_COMPLETED_ITEM = "add_completed_item"
    GET_PENDING_ITEMS = "get_pending_items"
    GET_COMPLETED_ITEMS = "get_completed_items"
    MOVE_ITEMS = "move_items"
    CLEAR_ITEMS = "clear_items"

    @classmethod
    def names(cls) -> list[str]:
        return [op.value for op in cls]

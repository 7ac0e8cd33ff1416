"""
Test the workflow tool registry: the closed catalogue, argument validation,
and the declarations bound to the model.
"""

import asyncio
import json

import pytest

from agent.tools import build_workflow_registry
from agent.tools.get_items import GetPendingItemsTool
from agent.tools.registry import ToolRegistry
from application.context import SessionContext
from domain.exceptions import ToolValidationError, UnknownOperationError
from domain.models import Operation


def _invoke(registry, name, args):
    return asyncio.run(registry.invoke(name, SessionContext(), args))


def test_registry_holds_exactly_the_six_operations(store):
    registry = build_workflow_registry(store)
    assert sorted(registry.names()) == sorted(Operation.names())


def test_registering_an_operation_twice_is_rejected(store):
    registry = ToolRegistry()
    registry.register(GetPendingItemsTool(store))
    with pytest.raises(ValueError):
        registry.register(GetPendingItemsTool(store))


def test_unknown_name_raises_unknown_operation(store):
    registry = build_workflow_registry(store)
    with pytest.raises(UnknownOperationError) as exc_info:
        registry.get("delete_everything")
    assert "clear_items" in exc_info.value.available


def test_add_pending_item_without_description_never_reaches_the_store(store):
    registry = build_workflow_registry(store)
    with pytest.raises(ToolValidationError) as exc_info:
        _invoke(registry, "add_pending_item", {"title": "Write docs"})

    assert [e["field"] for e in exc_info.value.errors] == ["description"]
    assert exc_info.value.errors[0]["type"] == "missing"
    assert store.calls == []


def test_values_are_not_coerced(store):
    registry = build_workflow_registry(store)
    with pytest.raises(ToolValidationError) as exc_info:
        _invoke(registry, "add_completed_item", {"title": 42, "description": "x"})
    assert exc_info.value.errors[0]["field"] == "title"

    with pytest.raises(ToolValidationError):
        _invoke(registry, "move_items", {"itemIds": "a", "targetType": "completed"})
    assert store.calls == []


def test_unknown_fields_are_rejected(store):
    registry = build_workflow_registry(store)
    with pytest.raises(ToolValidationError) as exc_info:
        _invoke(registry, "get_pending_items", {"limit": 5})
    assert exc_info.value.errors[0]["field"] == "limit"


def test_move_items_requires_a_non_empty_unique_id_set(store):
    registry = build_workflow_registry(store)
    with pytest.raises(ToolValidationError):
        _invoke(registry, "move_items", {"itemIds": [], "targetType": "completed"})
    with pytest.raises(ToolValidationError):
        _invoke(registry, "move_items", {"itemIds": ["a", "a"], "targetType": "completed"})
    assert store.calls == []


def test_move_items_rejects_an_unknown_target(store):
    registry = build_workflow_registry(store)
    with pytest.raises(ToolValidationError) as exc_info:
        _invoke(registry, "move_items", {"itemIds": ["a"], "targetType": "archived"})
    assert exc_info.value.errors[0]["field"] == "targetType"


def test_clear_items_requires_type(store):
    registry = build_workflow_registry(store)
    with pytest.raises(ToolValidationError) as exc_info:
        _invoke(registry, "clear_items", {})
    assert exc_info.value.errors[0]["field"] == "type"


def test_valid_calls_map_to_one_store_call_each(store):
    registry = build_workflow_registry(store)
    _invoke(registry, "add_pending_item", {"title": "A", "description": "a"})
    _invoke(registry, "add_completed_item", {"title": "B", "description": "b"})
    _invoke(registry, "get_completed_items", {})
    _invoke(registry, "move_items", {"itemIds": ["1", "2"], "targetType": "completed"})
    _invoke(registry, "clear_items", {"type": "pending"})

    assert store.calls == [
        ("create_item", {"status": "pending", "title": "A", "description": "a"}),
        ("create_item", {"status": "completed", "title": "B", "description": "b"}),
        ("list_items", {"status": "completed"}),
        ("move_items", {"item_ids": ["1", "2"], "target": "completed"}),
        ("clear_items", {"status": "pending"}),
    ]


def test_tool_output_is_the_store_response_verbatim(store):
    registry = build_workflow_registry(store)
    result = _invoke(registry, "get_pending_items", None)

    assert result.output == json.dumps({"method": "list_items", "call": 1, "status": "pending"})
    assert result.data["status"] == "pending"


def test_get_pending_items_twice_makes_two_independent_calls(store):
    registry = build_workflow_registry(store)
    first = _invoke(registry, "get_pending_items", {})
    second = _invoke(registry, "get_pending_items", {})

    assert len(store.calls) == 2
    assert first.data["call"] == 1
    assert second.data["call"] == 2


def test_declarations_expose_name_description_and_schema(store):
    registry = build_workflow_registry(store)
    declarations = {tool.name: tool for tool in registry.to_langchain_tools()}

    assert set(declarations) == set(Operation.names())
    move = declarations["move_items"]
    assert "pending and completed" in move.description
    assert set(move.args) == {"itemIds", "targetType"}
    assert not declarations["get_pending_items"].args


def test_declarations_run_through_registry_invoke(store):
    registry = build_workflow_registry(store)
    invoked = []
    original_invoke = registry.invoke

    async def recording_invoke(name, ctx, arguments):
        invoked.append((name, arguments))
        return await original_invoke(name, ctx, arguments)

    registry.invoke = recording_invoke
    declarations = {tool.name: tool for tool in registry.to_langchain_tools()}

    output = asyncio.run(declarations["clear_items"].ainvoke({"type": "pending"}))

    assert invoked == [("clear_items", {"type": "pending"})]
    assert store.calls == [("clear_items", {"status": "pending"})]
    assert json.loads(output)["method"] == "clear_items"

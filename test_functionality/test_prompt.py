"""
Test the system directive and the routing decision after a model turn.
"""

from datetime import datetime, timedelta, timezone

from langchain_core.messages import AIMessage, HumanMessage, ToolMessage
from langgraph.graph import END

from conftest import ai_tool_calls, tool_call
from agent.orchestrator import Orchestrator
from agent.prompt import DEFAULT_SYSTEM_PROMPT_TEMPLATE, build_system_prompt, load_prompt_template
from agent.router import TOOLS_NODE, route_model_output
from agent.tools import build_workflow_registry
from domain.models import Operation

NOW = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)


def test_directive_embeds_time_and_lists_every_operation(store):
    directive = build_system_prompt(build_workflow_registry(store), NOW)

    assert "2026-03-01T09:30:00+00:00" in directive
    assert "{system_time}" not in directive
    assert "{tools}" not in directive
    for name in Operation.names():
        assert f"- {name}: " in directive


def test_custom_template_keeps_literal_braces(store):
    template = 'Now: {system_time}\nReply as {"ok": true}'
    directive = build_system_prompt(build_workflow_registry(store), NOW, template)
    assert directive == 'Now: 2026-03-01T09:30:00+00:00\nReply as {"ok": true}'


def test_load_prompt_template(tmp_path):
    assert load_prompt_template(None) == DEFAULT_SYSTEM_PROMPT_TEMPLATE

    custom = tmp_path / "prompt.txt"
    custom.write_text("Time is {system_time}", encoding="utf-8")
    assert load_prompt_template(custom) == "Time is {system_time}"


def test_directive_is_recomputed_for_each_call(store):
    times = iter([NOW, NOW + timedelta(minutes=5)])
    orchestrator = Orchestrator(
        model=None,
        registry=build_workflow_registry(store),
        clock=lambda: next(times),
    )

    first = orchestrator.build_directive()
    second = orchestrator.build_directive()
    assert "09:30:00" in first
    assert "09:35:00" in second


def test_route_to_tools_when_actions_are_requested():
    state = {"messages": [HumanMessage(content="hi"), ai_tool_calls(tool_call("get_pending_items"))]}
    assert route_model_output(state) == TOOLS_NODE


def test_route_to_end_on_plain_answer():
    state = {"messages": [HumanMessage(content="hi"), AIMessage(content="Hello!")]}
    assert route_model_output(state) == END


def test_route_to_end_when_last_message_is_not_from_the_model():
    state = {"messages": [ToolMessage(content="[]", tool_call_id="call_1")]}
    assert route_model_output(state) == END
    assert route_model_output({"messages": []}) == END


def test_route_to_tools_when_only_unparseable_requests_are_present():
    message = AIMessage(content="", invalid_tool_calls=[{
        "name": "clear_items", "args": "{type:", "id": "c1",
        "error": None, "type": "invalid_tool_call",
    }])
    assert route_model_output({"messages": [message]}) == TOOLS_NODE

"""
agent.router - Decide where control goes after a model turn.
"""

from __future__ import annotations

from typing import Literal

from langchain_core.messages import AIMessage
from langgraph.graph import END, MessagesState

TOOLS_NODE = "tools"


def route_model_output(state: MessagesState) -> Literal["tools", "__end__"]:
    """Route to the tool node if the last message requests actions, else end.

    Requests whose arguments could not be parsed still go to the tool node
    so each one gets an error result.
    """
    messages = state["messages"]
    if not messages:
        return END
    last_message = messages[-1]
    if isinstance(last_message, AIMessage) and (
        last_message.tool_calls or last_message.invalid_tool_calls
    ):
        return TOOLS_NODE
    return END

"""
agent.executor - Agent execution engine.

The single class that runs the model + tool loop for one session. The loop
is a two-node LangGraph StateGraph:

    START → call_model ─┬─(tool calls)──→ tools ─→ call_model
                        └─(plain answer)→ END

Exactly one model call is outstanding at a time, and the graph does not
return to call_model until every request of the batch has its result.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from langchain_core.messages import BaseMessage, HumanMessage, ToolMessage
from langchain_core.runnables import RunnableConfig
from langgraph.errors import GraphRecursionError
from langgraph.graph import END, START, MessagesState, StateGraph

from application.context import SessionContext
from application.dto import AgentRunResult
from agent.memory import ConversationMemory
from agent.orchestrator import Orchestrator
from agent.router import TOOLS_NODE, route_model_output
from agent.tool_executor import ToolExecutor
from domain.exceptions import SessionLimitError, SessionTimeoutError

logger = logging.getLogger(__name__)

MODEL_NODE = "call_model"


class AgentExecutor:
    """Runs the model + tool selection loop.

    Constructed by factory.py with all dependencies injected. Owns one
    ConversationMemory, so one instance serves one session.

    Args:
        orchestrator:   Calls the model with directive + history.
        tool_executor:  Runs a batch of action requests.
        memory:         Conversation history for this session.
        max_iterations: Max model turns per user turn.
        session_timeout: Seconds allowed per user turn; None or 0 disables.
    """

    def __init__(
        self,
        orchestrator: Orchestrator,
        tool_executor: ToolExecutor,
        memory: ConversationMemory | None = None,
        max_iterations: int = 10,
        session_timeout: Optional[float] = None,
    ):
        self._orchestrator = orchestrator
        self._tool_executor = tool_executor
        self._memory = memory or ConversationMemory()
        self._max_iterations = max_iterations
        self._session_timeout = session_timeout or None
        self._graph = self._build_graph()

    @property
    def memory(self) -> ConversationMemory:
        return self._memory

    def reset(self) -> None:
        """Forget the conversation so far; the next turn starts fresh."""
        self._memory.clear()
        logger.info("Conversation memory cleared")

    def _build_graph(self):
        """Compile the two-node loop."""
        workflow = StateGraph(MessagesState)
        workflow.add_node(MODEL_NODE, self._call_model)
        workflow.add_node(TOOLS_NODE, self._call_tools)
        workflow.add_edge(START, MODEL_NODE)
        workflow.add_conditional_edges(MODEL_NODE, route_model_output, [TOOLS_NODE, END])
        workflow.add_edge(TOOLS_NODE, MODEL_NODE)
        return workflow.compile()

    # ------------------------------------------------------------------
    # Graph nodes
    # ------------------------------------------------------------------

    async def _call_model(self, state: MessagesState) -> dict[str, Any]:
        response = await self._orchestrator.next_step(state["messages"])
        return {"messages": [response]}

    async def _call_tools(self, state: MessagesState, config: RunnableConfig) -> dict[str, Any]:
        ctx = config["configurable"]["session"]
        last_message = state["messages"][-1]
        results = await self._tool_executor.execute(
            ctx, last_message.tool_calls, last_message.invalid_tool_calls,
        )
        return {"messages": results}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def run(self, ctx: SessionContext, user_input: str) -> AgentRunResult:
        """Process a user message and return the agent's response.

        Args:
            ctx:        Session context (conversation id, request id).
            user_input: The user's message text.

        Returns:
            AgentRunResult with the final answer and the messages this turn
            appended to the conversation.

        Raises:
            ModelInvocationError: The model call failed; memory is unchanged.
            SessionTimeoutError:  The turn exceeded the session timeout.
            SessionLimitError:    The loop exceeded max_iterations model turns.
        """
        ctx.new_request()
        logger.info(
            "Agent processing (conversation=%s, request=%s): %s",
            ctx.conversation_id, ctx.request_id, user_input[:80],
        )

        initial = [*self._memory.messages, HumanMessage(content=user_input)]
        config: RunnableConfig = {
            "configurable": {"session": ctx},
            # Each model turn plus its tool turn is two supersteps.
            "recursion_limit": self._max_iterations * 2,
        }

        try:
            final_state = await asyncio.wait_for(
                self._graph.ainvoke({"messages": initial}, config=config),
                timeout=self._session_timeout,
            )
        except asyncio.TimeoutError as e:
            raise SessionTimeoutError(
                f"Agent turn exceeded {self._session_timeout}s"
            ) from e
        except GraphRecursionError as e:
            raise SessionLimitError(
                f"Agent did not finish within {self._max_iterations} model turns"
            ) from e

        appended: list[BaseMessage] = final_state["messages"][len(initial) - 1:]
        self._memory.extend(appended)

        output = _message_text(final_state["messages"][-1])
        tool_calls = sum(1 for m in appended if isinstance(m, ToolMessage))
        logger.info(
            "Agent finished: %d tool call(s), output starts with: %s",
            tool_calls, output[:80],
        )
        return AgentRunResult(output=output, messages=appended, tool_calls=tool_calls)


def _message_text(message: BaseMessage) -> str:
    """Plain text of a message whose content may be a list of blocks."""
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)

"""
agent.orchestrator - The model-calling step of the agent loop.

Builds a fresh system directive (instructions + current time) for every
call and asks the model for its next step. Model failures are wrapped in
ModelInvocationError and escalate to the session caller.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable, Optional, Sequence

from langchain_core.messages import AIMessage, BaseMessage

from agent.prompt import DEFAULT_SYSTEM_PROMPT_TEMPLATE, build_system_prompt
from agent.tools.registry import ToolRegistry
from domain.exceptions import ModelInvocationError
from domain.ports import ChatModelPort

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Orchestrator:
    """Invoke the model with the directive, the history, and the declarations."""

    def __init__(
        self,
        model: ChatModelPort,
        registry: ToolRegistry,
        prompt_template: str = DEFAULT_SYSTEM_PROMPT_TEMPLATE,
        call_timeout: Optional[float] = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._model = model
        self._registry = registry
        self._declarations = registry.to_langchain_tools()
        self._prompt_template = prompt_template
        self._call_timeout = call_timeout or None
        self._clock = clock

    def build_directive(self) -> str:
        """Build the directive for the next model call, with the current time."""
        return build_system_prompt(self._registry, self._clock(), self._prompt_template)

    async def next_step(self, history: Sequence[BaseMessage]) -> AIMessage:
        directive = self.build_directive()
        try:
            response = await asyncio.wait_for(
                self._model.invoke(directive, list(history), self._declarations),
                timeout=self._call_timeout,
            )
        except asyncio.TimeoutError as e:
            raise ModelInvocationError(
                f"Model call timed out after {self._call_timeout}s"
            ) from e
        except Exception as e:
            raise ModelInvocationError(f"Model call failed: {e}") from e

        logger.info(
            "Model responded with %d tool call(s)", len(response.tool_calls),
        )
        return response

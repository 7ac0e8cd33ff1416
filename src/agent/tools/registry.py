"""
agent.tools.registry - Tool registration, validation, and invocation.

Central registry for the fixed catalogue of workflow operations. Maps an
operation name to its argument schema and its invocation, and exposes the
declarations the model binds to.
"""

from __future__ import annotations

import logging
from typing import Any

from langchain_core.tools import StructuredTool
from pydantic import ValidationError

from application.context import SessionContext
from agent.tools.base import BaseTool, ToolResult
from domain.exceptions import ToolValidationError, UnknownOperationError
from domain.models import Operation

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Manages tool registration and invocation.

    Only names from the Operation catalogue can be registered, each once.
    """

    def __init__(self):
        self._tools: dict[str, BaseTool] = {}

    def register(self, tool: BaseTool) -> None:
        """Register a tool by its operation name."""
        name = Operation(tool.name).value
        if name in self._tools:
            raise ValueError(f"Tool '{name}' already registered")
        self._tools[name] = tool
        logger.debug("Registered tool: %s", name)

    def get(self, name: str) -> BaseTool:
        """Get a tool by name."""
        if name not in self._tools:
            raise UnknownOperationError(name, self.names())
        return self._tools[name]

    def all(self) -> list[BaseTool]:
        """Return all registered tools."""
        return list(self._tools.values())

    def names(self) -> list[str]:
        """Return all registered tool names."""
        return list(self._tools.keys())

    def validate(self, name: str, arguments: dict[str, Any] | None) -> dict[str, Any]:
        """Check arguments against the tool's schema.

        Returns the validated arguments as a plain dict.

        Raises:
            UnknownOperationError: name is not registered.
            ToolValidationError:   arguments violate the schema.
        """
        schema = self.get(name).get_schema()
        try:
            params = schema.model_validate(arguments if arguments is not None else {})
        except ValidationError as e:
            raise ToolValidationError(name, _describe_errors(e)) from e
        return params.model_dump()

    async def invoke(
        self, name: str, ctx: SessionContext, arguments: dict[str, Any] | None,
    ) -> ToolResult:
        """Validate arguments, then invoke the tool.

        Validation failures short-circuit: the tool (and the remote store)
        is never called.
        """
        params = self.validate(name, arguments)
        tool = self.get(name)
        logger.debug(
            "Invoking tool %s (conversation=%s, request=%s)",
            name, ctx.conversation_id, ctx.request_id,
        )
        return await tool.execute(ctx, **params)

    def to_langchain_tools(self) -> list[StructuredTool]:
        """Convert all registered tools to LangChain StructuredTools.

        These are declarations for ``bind_tools``. Running one directly
        still goes through ``invoke``, so arguments are validated the same
        way as in the agent loop.
        """
        lc_tools = []
        for tool in self._tools.values():

            def _make_coroutine(name: str):
                async def coroutine(**kwargs: Any) -> str:
                    result = await self.invoke(name, SessionContext(), kwargs)
                    return result.output
                return coroutine

            lc_tools.append(StructuredTool.from_function(
                coroutine=_make_coroutine(Operation(tool.name).value),
                name=Operation(tool.name).value,
                description=tool.description,
                args_schema=tool.get_schema(),
            ))
        return lc_tools


def _describe_errors(error: ValidationError) -> list[dict[str, Any]]:
    """Flatten a pydantic ValidationError into field/message/type dicts."""
    details = []
    for item in error.errors():
        loc = ".".join(str(part) for part in item.get("loc", ()))
        details.append({
            "field": loc or "(arguments)",
            "message": item.get("msg", ""),
            "type": item.get("type", ""),
        })
    return details

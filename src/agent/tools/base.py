"""
agent.tools.base - Base tool interface and result container.

All workflow tools inherit from BaseTool and return ToolResult.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict

from application.context import SessionContext
from domain.models import Operation


class StrictToolInput(BaseModel):
    """Base schema for tool arguments.

    Strict mode: values are never coerced ("3" is not an int, a string is
    not a list) and unknown fields are rejected.
    """
    model_config = ConfigDict(strict=True, extra="forbid")


@dataclass
class ToolResult:
    """Result returned by a tool execution.

    output: String shown to the model (the store's JSON response, verbatim).
    data:   Parsed payload for callers that want it (not passed through the LLM).
    """
    output: str
    data: Any = None

    @classmethod
    def from_response(cls, response: str) -> ToolResult:
        try:
            data = json.loads(response)
        except ValueError:
            data = None
        return cls(output=response, data=data)


class BaseTool(ABC):
    """Abstract base for all workflow tools."""

    name: Operation
    description: str

    @abstractmethod
    async def execute(self, ctx: SessionContext, **kwargs) -> ToolResult:
        """Execute the tool with already-validated arguments."""
        ...

    @abstractmethod
    def get_schema(self) -> type[BaseModel]:
        """Return the Pydantic schema for this tool's input arguments."""
        ...

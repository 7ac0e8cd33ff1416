"""
agent.tool_executor - Run one batch of action requests.

Every request in the batch is dispatched at once (asyncio.gather) and gets
exactly one ToolMessage back, tagged with the request's tool_call_id.
Failures local to one request (unknown operation, invalid arguments,
store errors, timeouts) become error-shaped results and never escape
the batch.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Optional, Sequence

from langchain_core.messages import InvalidToolCall, ToolCall, ToolMessage

from application.context import SessionContext
from agent.tools.registry import ToolRegistry
from domain.exceptions import (
    ToolValidationError,
    UnknownOperationError,
    WorkflowStoreError,
)

logger = logging.getLogger(__name__)


class ToolExecutor:
    """Dispatch action requests to the registry and collect the results.

    Args:
        registry:      The workflow tool registry.
        call_timeout:  Seconds allowed per tool invocation; None or 0 disables.
    """

    def __init__(self, registry: ToolRegistry, call_timeout: Optional[float] = None):
        self._registry = registry
        self._call_timeout = call_timeout or None

    async def execute(
        self,
        ctx: SessionContext,
        tool_calls: Sequence[ToolCall],
        invalid_tool_calls: Sequence[InvalidToolCall] = (),
    ) -> list[ToolMessage]:
        """Execute a batch concurrently; results come back in request order.

        Requests whose arguments could not be parsed are never executed;
        each gets a validation error result after the executed ones.
        """
        if not tool_calls and not invalid_tool_calls:
            return []
        logger.info(
            "Executing %d tool call(s) (conversation=%s): %s",
            len(tool_calls), ctx.conversation_id,
            ", ".join(call["name"] for call in tool_calls),
        )
        results = list(await asyncio.gather(
            *(self._execute_one(ctx, call) for call in tool_calls)
        ))
        results.extend(_unparsed_message(call) for call in invalid_tool_calls)
        return results

    async def _execute_one(self, ctx: SessionContext, call: ToolCall) -> ToolMessage:
        name = call["name"]
        call_id = call.get("id") or ""

        try:
            result = await asyncio.wait_for(
                self._registry.invoke(name, ctx, call.get("args")),
                timeout=self._call_timeout,
            )
        except UnknownOperationError as e:
            logger.warning("Model requested unknown operation '%s'", name)
            return _error_message(call_id, name, {
                "error": "unknown_operation",
                "operation": name,
                "available": e.available,
            })
        except ToolValidationError as e:
            logger.info("Rejected arguments for %s: %s", name, e.errors)
            return _error_message(call_id, name, {
                "error": "validation_error",
                "operation": name,
                "details": e.errors,
            })
        except WorkflowStoreError as e:
            logger.warning("Tool %s failed: %s", name, e)
            return _error_message(call_id, name, {
                "error": "remote_call_failed",
                "operation": name,
                "category": e.category,
                "status_code": e.status_code,
                "detail": str(e),
            })
        except asyncio.TimeoutError:
            logger.warning("Tool %s timed out after %ss", name, self._call_timeout)
            return _error_message(call_id, name, {
                "error": "remote_call_failed",
                "operation": name,
                "category": "timeout",
                "status_code": None,
                "detail": f"Operation did not complete within {self._call_timeout}s",
            })
        except Exception:
            logger.exception("Tool %s raised unexpectedly", name)
            return _error_message(call_id, name, {
                "error": "internal_error",
                "operation": name,
                "detail": "The operation failed unexpectedly.",
            })

        return ToolMessage(content=result.output, tool_call_id=call_id, name=name)


def _unparsed_message(call: InvalidToolCall) -> ToolMessage:
    name = call.get("name") or ""
    logger.info("Model sent unparseable arguments for %s", name or "(unnamed)")
    return _error_message(call.get("id") or "", name, {
        "error": "validation_error",
        "operation": name,
        "details": [{
            "field": "(arguments)",
            "message": call.get("error") or "Arguments are not valid JSON",
            "type": "json_invalid",
        }],
    })


def _error_message(call_id: str, name: str, payload: dict[str, Any]) -> ToolMessage:
    return ToolMessage(
        content=json.dumps(payload),
        tool_call_id=call_id,
        name=name,
        status="error",
    )

"""
domain.exceptions - Custom exception hierarchy for the workflow task agent.

All domain-level errors inherit from WorkflowAgentError so callers can catch
broad or specific exceptions as needed.

Errors local to one action (validation, unknown operation, store failures)
are turned into tool results by the ToolExecutor. Session-level errors
(model failure, timeout, iteration limit) propagate to the caller.
"""

from __future__ import annotations

from typing import Any, Optional


class WorkflowAgentError(Exception):
    """Base exception for all domain-level errors."""


class ConfigurationError(WorkflowAgentError):
    """Raised when settings are invalid (unknown provider, missing key)."""


# ---------------------------------------------------------------------------
# Action-level errors (recovered by the ToolExecutor)
# ---------------------------------------------------------------------------

class UnknownOperationError(WorkflowAgentError):
    """Raised when a requested operation is not in the registry."""

    def __init__(self, operation: str, available: list[str]):
        super().__init__(f"Unknown operation '{operation}'")
        self.operation = operation
        self.available = available


class ToolValidationError(WorkflowAgentError):
    """Raised when an operation's arguments do not satisfy its schema.

    errors: one dict per violated constraint with ``field``, ``message``
            and ``type`` keys.
    """

    def __init__(self, operation: str, errors: list[dict[str, Any]]):
        fields = ", ".join(e["field"] for e in errors) or "(arguments)"
        super().__init__(f"Invalid arguments for '{operation}': {fields}")
        self.operation = operation
        self.errors = errors


class WorkflowStoreError(WorkflowAgentError):
    """Raised when a call to the remote workflow store fails.

    category:    "http_status", "transport" or "timeout".
    status_code: HTTP status when the store answered with a non-success code.
    """

    def __init__(
        self,
        message: str,
        *,
        category: str,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.category = category
        self.status_code = status_code


# ---------------------------------------------------------------------------
# Session-level errors (escalated to the caller)
# ---------------------------------------------------------------------------

class ModelInvocationError(WorkflowAgentError):
    """Raised when the language model call fails or times out."""


class SessionTimeoutError(WorkflowAgentError):
    """Raised when a user turn exceeds the configured session timeout."""


class SessionLimitError(WorkflowAgentError):
    """Raised when the loop exceeds the configured number of model turns."""

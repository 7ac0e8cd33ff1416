"""
agent.prompt - System directive for the workflow agent.

The directive is rebuilt before every model call: the template's
``{system_time}`` placeholder is filled with the current time and the
``{tools}`` placeholder with the registered operations.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

from agent.tools.registry import ToolRegistry
from domain.models import Operation

DEFAULT_SYSTEM_PROMPT_TEMPLATE = """You are a workflow management assistant that helps users organize and track tasks.

System time: {system_time}

You have access to these tools:
{tools}

Guidelines:

1. When creating tasks:
   - Use add_pending_item for new tasks, add_completed_item for tasks that are already done
   - Always include both title and description

2. When asked about tasks:
   - Use get_pending_items or get_completed_items
   - Parse the JSON response and summarize it
   - Keep task IDs at hand for follow-up actions

3. When updating task status:
   - First get the current tasks to confirm IDs
   - Then use move_items with the correct IDs and target state
   - Confirm the change was successful

4. When clearing tasks:
   - ALWAYS confirm with the user before using clear_items
   - Say which type (pending or completed) will be cleared
   - Warn that this action cannot be undone

5. When a tool returns an error:
   - A "validation_error" means your arguments were wrong, so fix them and retry
   - A "remote_call_failed" means the task service had a problem, so tell the user

Response format:
- Start with a brief summary (e.g. "Found 12 pending tasks, mostly code review")
- Group similar items and summarize repeated ones
- Only show full details or raw IDs when asked or when needed for an action
- Keep responses concise and use natural language
- Ask for clarification if task details are unclear"""


def load_prompt_template(path: Optional[Path]) -> str:
    """Return the custom template at ``path``, or the default one."""
    if path is None:
        return DEFAULT_SYSTEM_PROMPT_TEMPLATE
    return Path(path).read_text(encoding="utf-8")


def build_system_prompt(
    registry: ToolRegistry,
    system_time: datetime,
    template: str = DEFAULT_SYSTEM_PROMPT_TEMPLATE,
) -> str:
    """Build the system directive for one model call.

    Args:
        registry:    The tool registry with all registered tools.
        system_time: Wall-clock time to embed (timezone-aware preferred).
        template:    Directive template with ``{system_time}`` and
                     optionally ``{tools}`` placeholders.

    Returns:
        The directive text.
    """
    tool_lines = "\n".join(
        f"- {Operation(tool.name).value}: {tool.description}" for tool in registry.all()
    )
    # str.replace instead of format(): custom templates may contain JSON braces.
    return (
        template
        .replace("{system_time}", system_time.isoformat())
        .replace("{tools}", tool_lines)
    )

"""
Shared fakes for the workflow agent tests.

- RecordingStore:     in-memory WorkflowStorePort that records every call.
- ScriptedChatModel:  ChatModelPort that replays fixed AIMessages.
- FakeSession:        stands in for requests.Session in HTTP client tests.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
import requests
from langchain_core.messages import AIMessage

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from domain.exceptions import WorkflowStoreError
from domain.models import ItemStatus


class RecordingStore:
    """Records calls; methods listed in ``fail_on`` raise a transport error."""

    def __init__(self, fail_on: tuple[str, ...] = ()):
        self.calls: list[tuple[str, dict]] = []
        self._fail_on = set(fail_on)

    async def create_item(self, status: ItemStatus, title: str, description: str) -> str:
        return self._record(
            "create_item", status=status.value, title=title, description=description,
        )

    async def list_items(self, status: ItemStatus) -> str:
        return self._record("list_items", status=status.value)

    async def move_items(self, item_ids: list[str], target: ItemStatus) -> str:
        return self._record("move_items", item_ids=item_ids, target=target.value)

    async def clear_items(self, status: ItemStatus) -> str:
        return self._record("clear_items", status=status.value)

    def _record(self, method: str, **kwargs) -> str:
        self.calls.append((method, kwargs))
        if method in self._fail_on:
            raise WorkflowStoreError(
                "Workflow API unreachable", category="transport",
            )
        return json.dumps({"method": method, "call": len(self.calls), **kwargs})


class ScriptedChatModel:
    """Returns the scripted responses in order; exceptions are raised."""

    def __init__(self, responses):
        self._responses = list(responses)
        self.calls: list[dict] = []

    async def invoke(self, directive, history, tools):
        self.calls.append({
            "directive": directive,
            "history": list(history),
            "tools": [t.name for t in tools],
        })
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakeSession:
    """Minimal requests.Session replacement."""

    def __init__(self, response: requests.Response | None = None, error: Exception | None = None):
        self.headers: dict[str, str] = {}
        self.requests: list[dict] = []
        self._response = response
        self._error = error

    def request(self, method, url, json=None, timeout=None):
        self.requests.append({"method": method, "url": url, "json": json, "timeout": timeout})
        if self._error is not None:
            raise self._error
        return self._response


def make_response(status_code: int, body: str = "") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    response.headers["Content-Type"] = "application/json"
    return response


def tool_call(name: str, args: dict | None = None, call_id: str = "call_1") -> dict:
    return {"name": name, "args": args or {}, "id": call_id, "type": "tool_call"}


def ai_tool_calls(*calls: dict) -> AIMessage:
    return AIMessage(content="", tool_calls=list(calls))


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()

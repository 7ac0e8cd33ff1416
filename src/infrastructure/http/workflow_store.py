"""
infrastructure.http.workflow_store - HTTP client for the workflow item API.

Implements WorkflowStorePort by calling the REST backend under
``/api/workflows``. Uses requests via run_in_executor for async compat, so
several calls from one batch can be in flight at once.

Routes:
    POST   /{status}   body {title, description}     create
    GET    /{status}                                 list
    PATCH  /{source}   body {itemIds, targetType}    move (source = opposite of target)
    DELETE /{status}                                 clear

Responses are relayed as JSON text without reshaping. Any transport problem
or non-success status raises WorkflowStoreError.
"""

from __future__ import annotations

import asyncio
import json
import logging
from functools import partial
from typing import Any, Optional

import requests

from domain.exceptions import WorkflowStoreError
from domain.models import ItemStatus

logger = logging.getLogger(__name__)


class HttpWorkflowStore:
    """Call the workflow API for create/list/move/clear.

    Implements WorkflowStorePort (structural typing, no explicit inheritance).

    Args:
        base_url: Base URL of the workflow API, e.g.
                  ``http://localhost:3000/api/workflows``.
        timeout:  Seconds per HTTP request.
        session:  Optional requests.Session (injected in tests).
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3000/api/workflows",
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
        })

    async def create_item(
        self, status: ItemStatus, title: str, description: str,
    ) -> str:
        return await self._request(
            "POST", status.value, {"title": title, "description": description},
        )

    async def list_items(self, status: ItemStatus) -> str:
        return await self._request("GET", status.value)

    async def move_items(self, item_ids: list[str], target: ItemStatus) -> str:
        source = target.opposite()
        return await self._request(
            "PATCH", source.value, {"itemIds": list(item_ids), "targetType": target.value},
        )

    async def clear_items(self, status: ItemStatus) -> str:
        return await self._request("DELETE", status.value)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    async def _request(
        self, method: str, path: str, body: Optional[dict[str, Any]] = None,
    ) -> str:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, partial(self._send, method, path, body),
        )

    def _send(self, method: str, path: str, body: Optional[dict[str, Any]]) -> str:
        """Synchronous HTTP call to the workflow API (runs in thread pool)."""
        url = f"{self._base_url}/{path}"
        logger.info("%s %s", method, url)
        try:
            response = self._session.request(
                method, url, json=body, timeout=self._timeout,
            )
        except requests.exceptions.Timeout as e:
            raise WorkflowStoreError(
                f"Workflow API timed out after {self._timeout}s ({method} {url})",
                category="timeout",
            ) from e
        except requests.exceptions.RequestException as e:
            raise WorkflowStoreError(
                f"Workflow API unreachable at {url}: {e}",
                category="transport",
            ) from e

        if not response.ok:
            raise WorkflowStoreError(
                f"Workflow API returned HTTP {response.status_code} "
                f"for {method} /{path}: {response.text[:200]}",
                category="http_status",
                status_code=response.status_code,
            )

        return _serialize(response)


def _serialize(response: requests.Response) -> str:
    """Relay the response body as JSON text.

    Non-JSON bodies are passed through as-is; empty bodies become a
    ``{"status_code": N}`` confirmation so the model always sees an outcome.
    """
    if not response.content:
        return json.dumps({"status_code": response.status_code})
    try:
        return json.dumps(response.json(), ensure_ascii=False)
    except ValueError:
        return response.text

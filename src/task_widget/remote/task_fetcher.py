"""Task fetcher for the remote tasks API."""

import json
import logging
from typing import Any, Protocol

import httpx

from task_widget.api.models import Task

logger = logging.getLogger(__name__)


class TaskWidgetError(Exception):
    """Base error for task widget failures."""


class FetchError(TaskWidgetError):
    """Network failure, timeout or non-2xx response from the tasks API."""

    def __init__(self, scope: str, message: str, status_code: int | None = None) -> None:
        super().__init__(f"Fetching scope '{scope}' failed: {message}")
        self.scope = scope
        self.status_code = status_code


class ParseError(TaskWidgetError):
    """Response body from the tasks API is not valid JSON."""

    def __init__(self, scope: str, message: str) -> None:
        super().__init__(f"Parsing scope '{scope}' failed: {message}")
        self.scope = scope


class TaskFetcher(Protocol):
    """Protocol for fetching tasks."""

    async def fetch_tasks(self, scope: str) -> list[Task]:
        """Fetch raw tasks for one scope ("active" or "upcoming")."""
        ...


class HttpTaskFetcher:
    """Task fetcher backed by an HTTP JSON API."""

    def __init__(
        self,
        base_url: str,
        auth_token: str = "",
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize fetcher.

        Args:
            base_url: API root; requests go to {base_url}/tasks
            auth_token: Bearer token, omitted from requests when empty
            timeout: Per-request timeout in seconds
            client: Optional pre-built client (caller keeps ownership)
        """
        self._base_url = base_url.rstrip("/")
        self._auth_token = auth_token
        self._timeout = timeout
        self._client = client
        self._owns_client = client is None

    @property
    def headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._auth_token:
            headers["Authorization"] = f"Bearer {self._auth_token}"
        return headers

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def aclose(self) -> None:
        """Close the underlying client if this fetcher created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def fetch_tasks(self, scope: str) -> list[Task]:
        """Fetch tasks for a scope.

        Args:
            scope: Scope name sent as the `scope` query parameter

        Returns:
            Tasks from the response `items` field (empty if it is missing)

        Raises:
            FetchError: On network failure, invalid URL, timeout or non-2xx status
            ParseError: If the body is not valid JSON
        """
        url = f"{self._base_url}/tasks"
        client = self._get_client()

        try:
            response = await client.get(url, params={"scope": scope}, headers=self.headers)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise FetchError(scope, f"{type(e).__name__}: {e}") from e

        if not response.is_success:
            raise FetchError(
                scope,
                f"HTTP {response.status_code} from {url}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ParseError(scope, str(e)) from e

        tasks = self._parse_items(scope, body)
        logger.info(f"[TaskFetcher] Fetched {len(tasks)} tasks for scope '{scope}'")
        return tasks

    def _parse_items(self, scope: str, body: Any) -> list[Task]:
        """Convert the response body into tasks, tolerating a missing `items` field."""
        items = body.get("items") if isinstance(body, dict) else None
        if not isinstance(items, list):
            logger.warning(f"[TaskFetcher] No 'items' list in response for scope '{scope}'")
            return []

        tasks: list[Task] = []
        for index, item in enumerate(items):
            if not isinstance(item, dict):
                logger.warning(f"[TaskFetcher] Skipping non-object item {index} in scope '{scope}'")
                continue
            tasks.append(Task.from_dict(item))
        return tasks

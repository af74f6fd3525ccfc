"""Test fixtures for TaskWidget."""

from collections.abc import Callable
from datetime import date
from typing import Any

import httpx
import pytest

from task_widget.config import WidgetConfig

BASE_URL = "https://tasks.example.com/api"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> None:
    """Keep local .env / task_widget.yaml and TASK_WIDGET_* vars out of tests."""
    monkeypatch.chdir(tmp_path)
    for name in [
        "TASK_WIDGET_BASE_URL",
        "TASK_WIDGET_AUTH_TOKEN",
        "TASK_WIDGET_SHOW_ACTIVE_TASKS",
        "TASK_WIDGET_SHOW_UPCOMING_TASKS",
        "TASK_WIDGET_MAX_TASKS_TO_SHOW",
    ]:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def today() -> date:
    return date(2024, 6, 10)


@pytest.fixture
def widget_config() -> WidgetConfig:
    """Config pointing at the fake tasks API."""
    return WidgetConfig(base_url=BASE_URL, auth_token="secret-token")


def make_item(
    markdown: str = "Task",
    state: str | None = "active",
    schedule: str | None = None,
    deadline: str | None = None,
    task_id: str | None = None,
) -> dict[str, Any]:
    """Build one raw API item."""
    info: dict[str, Any] = {}
    if state is not None:
        info["state"] = state
    if schedule is not None:
        info["scheduleDate"] = schedule
    if deadline is not None:
        info["deadlineDate"] = deadline
    return {"id": task_id or markdown, "markdown": markdown, "taskInfo": info}


@pytest.fixture
def scope_items() -> dict[str, list[dict[str, Any]]]:
    """Items served per scope by the fake API."""
    return {
        "active": [
            make_item("Write report", schedule="2024-06-12", task_id="a1"),
            make_item("Old chore", state="done", schedule="2024-06-01", task_id="a2"),
        ],
        "upcoming": [
            make_item("Pay rent", deadline="2024-06-11", task_id="u1"),
        ],
    }


@pytest.fixture
def make_transport() -> Callable[..., httpx.MockTransport]:
    """Factory for a MockTransport serving {"items": [...]} per scope."""

    def factory(
        items_by_scope: dict[str, Any],
        requests: list[httpx.Request] | None = None,
    ) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if requests is not None:
                requests.append(request)
            scope = request.url.params.get("scope", "")
            payload = items_by_scope.get(scope)
            if isinstance(payload, httpx.Response):
                return payload
            if isinstance(payload, Exception):
                raise payload
            return httpx.Response(200, json={"items": payload or []})

        return httpx.MockTransport(handler)

    return factory

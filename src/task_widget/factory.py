"""Dependency injection factory."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from task_widget.config import WidgetConfig
from task_widget.remote.task_fetcher import HttpTaskFetcher
from task_widget.widget_service import TaskWidgetService

logger = logging.getLogger(__name__)

# Global config instance for dependency injection
_config: WidgetConfig | None = None

# Global fetcher (owns the pooled HTTP client)
_task_fetcher: HttpTaskFetcher | None = None


def get_config() -> WidgetConfig:
    """Get or create WidgetConfig instance."""
    global _config
    if _config is None:
        _config = WidgetConfig()  # type: ignore[call-arg]
    return _config


def get_task_fetcher() -> HttpTaskFetcher:
    """Get or create the HttpTaskFetcher singleton."""
    global _task_fetcher
    if _task_fetcher is None:
        config = get_config()
        _task_fetcher = HttpTaskFetcher(
            config.base_url,
            auth_token=config.auth_token,
            timeout=config.request_timeout,
        )
    return _task_fetcher


def get_widget_service() -> TaskWidgetService:
    """Create TaskWidgetService for dependency injection."""
    return TaskWidgetService(get_task_fetcher(), get_config())


async def close_task_fetcher() -> None:
    """Close the shared fetcher and drop the singleton."""
    global _task_fetcher
    if _task_fetcher is not None:
        await _task_fetcher.aclose()
        _task_fetcher = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifecycle - startup and shutdown."""
    config = get_config()
    logger.info(f"[Lifespan] Serving tasks from {config.base_url}")
    try:
        yield
    finally:
        logger.info("[Lifespan] Closing HTTP client...")
        await close_task_fetcher()


def create_app() -> FastAPI:
    """Create FastAPI application (composition root)."""
    from task_widget.api.widget import router as widget_router

    app = FastAPI(
        title="TaskWidget",
        description="Compact summary of pending and upcoming tasks",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(widget_router, prefix="/api")

    return app

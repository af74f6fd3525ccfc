"""TaskWidget main application."""

import argparse
import asyncio
import logging
import sys

import uvicorn
from pydantic import ValidationError

from task_widget.factory import (
    close_task_fetcher,
    create_app,
    get_config,
    get_widget_service,
)
from task_widget.presentation.text_renderer import TextRenderer

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging for the process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)-8s [%(name)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


async def show_widget() -> str:
    """Fetch once and render the widget as text."""
    config = get_config()
    try:
        summary = await get_widget_service().build_summary()
    finally:
        await close_task_fetcher()
    return TextRenderer(width=config.widget_width).render(summary)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments (defaults to sys.argv)."""
    parser = argparse.ArgumentParser(prog="task-widget", description=__doc__)
    parser.add_argument(
        "command",
        nargs="?",
        choices=["serve", "show"],
        default="serve",
        help="serve the JSON API (default) or print the widget once",
    )
    parser.add_argument("--log-level", default=None, help="override TASK_WIDGET_LOG_LEVEL")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the application."""
    args = parse_args(argv)

    try:
        config = get_config()
    except ValidationError as e:
        configure_logging(args.log_level or "INFO")
        logger.error(f"[Main] Invalid configuration: {e}")
        return 1

    configure_logging(args.log_level or config.log_level)

    if args.command == "show":
        print(asyncio.run(show_widget()))
        return 0

    uvicorn.run(
        create_app(),
        host=config.host,
        port=config.port,
        log_level=(args.log_level or config.log_level).lower(),
    )

    return 0


if __name__ == "__main__":
    sys.exit(main())

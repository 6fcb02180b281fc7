#!/usr/bin/env python3
"""
HTML Screenshot - CLI Entry Point
Usage: main.py <html> [width] [height]

Prints one JSON object to stdout:
  {"success": true, "data": "<base64 png>"} and exits 0, or
  {"success": false, "error": "<message>"} and exits 1
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from app.core.config import get_settings
from modules.errors import ErrorFactory, RenderException
from modules.models import ScreenshotRequest, ScreenshotResult, parse_dimension
from render_engine import ScreenshotRenderer
from src.logger import get_logger, setup_logging as setup_structured_logging


def setup_logging(log_level: str = "INFO") -> None:
    """Setup logging on stderr, stdout is reserved for the result"""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
    setup_structured_logging(log_level)


class ArgumentParser(argparse.ArgumentParser):
    """Reports usage errors through the JSON error channel instead of exiting with 2"""

    def error(self, message):
        raise RenderException(ErrorFactory.invalid_arguments(message))


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse the CLI arguments

    Positionals are read literally, in order, after options are removed, so HTML
    or dimensions starting with '-' are kept as values. Arguments past the
    third positional are ignored.
    """
    parser = ArgumentParser(
        description="Render an HTML fragment to a base64 PNG using headless Chromium",
        usage="%(prog)s [--log-level LEVEL] [--] html [width] [height]",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error"],
        help="Logging level (default: LOG_LEVEL from the environment)"
    )
    args, positionals = parser.parse_known_args(argv)

    if positionals and positionals[0] == "--":
        positionals = positionals[1:]
    positionals = positionals + [None] * 3

    args.html, args.width, args.height = positionals[:3]
    return args


def build_request(args: argparse.Namespace) -> ScreenshotRequest:
    """Validate CLI arguments into a screenshot request"""
    settings = get_settings()

    html = args.html
    if html == "-":
        html = sys.stdin.read()
    if html is None:
        raise RenderException(ErrorFactory.missing_html())

    width = parse_dimension(args.width, settings.DEFAULT_WIDTH, name="width")
    height = parse_dimension(args.height, settings.DEFAULT_HEIGHT, name="height")
    return ScreenshotRequest(html=html, width=width, height=height)


def run(args: argparse.Namespace) -> ScreenshotResult:
    try:
        request = build_request(args)
    except RenderException as e:
        logging.getLogger(__name__).error(f"Invalid arguments: {e}")
        return ScreenshotResult.failed(e.message)

    get_logger().info("screenshot_requested", width=request.width, height=request.height)
    renderer = ScreenshotRenderer(settings=get_settings())
    return asyncio.run(renderer.take_screenshot(request))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    load_dotenv()

    try:
        args = parse_args(argv)
        settings = get_settings()
        setup_logging(args.log_level or settings.log_level)
        get_logger().bind_context(app=settings.app_name)
        result = run(args)
    except RenderException as e:
        result = ScreenshotResult.failed(e.message)
    except Exception as e:
        result = ScreenshotResult.failed(str(e))

    print(result.to_json(), flush=True)
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())

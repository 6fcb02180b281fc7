"""
HTML Screenshot Render Engine
Renders an HTML fragment in headless Chromium and returns a base64 PNG
"""

import base64
from typing import Callable, Optional

from playwright.async_api import Browser, Page

from app.core.config import Settings, get_settings
from modules.errors import ErrorFactory, RenderException, handle_async_render_exception
from modules.models import ScreenshotRequest, ScreenshotResult
from src.logger import get_logger
from utils.browser_manager import BrowserManager


class ScreenshotRenderer:
    """Runs launch -> page -> content -> capture and always tears the browser down"""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        browser_manager_factory: Callable[[Settings], BrowserManager] = BrowserManager,
    ):
        self.settings = settings or get_settings()
        self.browser_manager_factory = browser_manager_factory
        self.logger = get_logger()

    async def take_screenshot(self, request: ScreenshotRequest) -> ScreenshotResult:
        """
        Render the request and capture the viewport

        Args:
            request: HTML and pixel dimensions

        Returns:
            Successful result with base64 PNG data, or failed result with the error message
        """
        self.logger.info(
            "screenshot_started",
            width=request.width,
            height=request.height,
            html_length=len(request.html),
        )

        try:
            async with self.browser_manager_factory(self.settings) as manager:
                browser = await self._launch(manager)
                page = await self._open_page(manager, browser, request.width, request.height)
                await self._load_content(page, request.html)
                screenshot = await self._capture(page, request.width, request.height)

            data = base64.b64encode(screenshot).decode("ascii")
            self.logger.info("screenshot_completed", png_bytes=len(screenshot))
            return ScreenshotResult.ok(data)

        except RenderException as e:
            self.logger.error("screenshot_failed", **e.to_dict())
            return ScreenshotResult.failed(e.message)

        except Exception as e:
            error = ErrorFactory.unexpected_error(original_error=str(e))
            self.logger.error("screenshot_failed", **error.to_dict())
            return ScreenshotResult.failed(error.message)

    @handle_async_render_exception("launch")
    async def _launch(self, manager: BrowserManager) -> Browser:
        with self.logger.timer("launch"):
            return await manager.create_browser()

    @handle_async_render_exception("open_page")
    async def _open_page(self, manager: BrowserManager, browser: Browser, width: int, height: int) -> Page:
        return await manager.create_page(browser, width, height)

    @handle_async_render_exception("load_content")
    async def _load_content(self, page: Page, html: str):
        with self.logger.timer("load_content"):
            await page.set_content(html, wait_until=self.settings.WAIT_UNTIL)

    @handle_async_render_exception("capture")
    async def _capture(self, page: Page, width: int, height: int) -> bytes:
        with self.logger.timer("capture"):
            return await page.screenshot(
                type='png',
                clip={'x': 0, 'y': 0, 'width': width, 'height': height}
            )


async def render_html_to_png(html: str, width: int = 1200, height: int = 630) -> ScreenshotResult:
    """Render HTML with the default settings"""
    request = ScreenshotRequest(html=html, width=width, height=height)
    return await ScreenshotRenderer().take_screenshot(request)

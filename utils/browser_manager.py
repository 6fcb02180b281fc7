"""
Browser Manager for Playwright
Owns the single headless browser used for one screenshot
"""

import logging
from typing import Optional

from playwright.async_api import async_playwright, Browser, Page

from app.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class BrowserManager:
    """Manages the Playwright driver and one Chromium instance"""

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize browser manager"""
        self.settings = settings or get_settings()
        self.playwright = None
        self.browser = None

    async def create_browser(self) -> Browser:
        """
        Launch headless Chromium

        Returns:
            Browser instance
        """
        if not self.playwright:
            self.playwright = await async_playwright().start()

        launch_options = {
            'headless': True,
            'args': list(self.settings.BROWSER_ARGS),
            'handle_sigint': False,
            'handle_sigterm': False,
            'handle_sighup': False,
        }
        if self.settings.BROWSER_EXECUTABLE_PATH:
            launch_options['executable_path'] = self.settings.BROWSER_EXECUTABLE_PATH

        try:
            self.browser = await self.playwright.chromium.launch(**launch_options)
            logger.info(f"Browser launched with args {launch_options['args']}")
            return self.browser

        except Exception as e:
            logger.error(f"Failed to create browser: {str(e)}")
            raise

    async def create_page(self, browser: Browser, width: int = 1200, height: int = 630) -> Page:
        """
        Create a page with a fixed viewport

        Args:
            browser: Browser instance
            width: Viewport width
            height: Viewport height

        Returns:
            Page instance
        """
        context = await browser.new_context(
            viewport={'width': width, 'height': height},
            device_scale_factor=self.settings.DEVICE_SCALE_FACTOR,
        )
        page = await context.new_page()

        page.set_default_timeout(self.settings.BROWSER_TIMEOUT)
        page.set_default_navigation_timeout(self.settings.BROWSER_TIMEOUT)

        logger.debug(f"Created page with viewport {width}x{height}")
        return page

    async def cleanup(self):
        """Close the browser and stop Playwright"""
        if self.browser:
            try:
                await self.browser.close()
                logger.debug("Browser closed")
            except Exception as e:
                logger.error(f"Error closing browser: {str(e)}")
            finally:
                self.browser = None

        if self.playwright:
            try:
                await self.playwright.stop()
                logger.debug("Playwright stopped")
            except Exception as e:
                logger.error(f"Error stopping Playwright: {str(e)}")
            finally:
                self.playwright = None

    async def __aenter__(self):
        """Context manager entry"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        await self.cleanup()

"""
Pytest fixtures for html-screenshot tests
"""
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.core.config import Settings, get_settings
from src import logger as logger_module

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image-data"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process, reset around each test"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def fake_page():
    page = MagicMock()
    page.set_content = AsyncMock(return_value=None)
    page.screenshot = AsyncMock(return_value=PNG_BYTES)
    return page


class FakeBrowserManager:
    """Stands in for BrowserManager, records the calls made against it"""

    instances = []

    def __init__(self, settings, page=None, launch_error=None):
        self.settings = settings
        self.page = page
        self.launch_error = launch_error
        self.browser = MagicMock(name="browser")
        self.page_sizes = []
        self.cleaned_up = False
        FakeBrowserManager.instances.append(self)

    async def create_browser(self):
        if self.launch_error:
            raise self.launch_error
        return self.browser

    async def create_page(self, browser, width, height):
        self.page_sizes.append((width, height))
        return self.page

    async def cleanup(self):
        self.cleaned_up = True

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.cleanup()


@pytest.fixture
def manager_factory(fake_page):
    """Factory producing FakeBrowserManager instances bound to fake_page"""
    FakeBrowserManager.instances = []
    options = {}

    def factory(settings):
        return FakeBrowserManager(settings, page=fake_page, **options)

    factory.options = options
    factory.instances = FakeBrowserManager.instances
    return factory


@pytest.fixture(autouse=True)
def restore_root_logging():
    """main.setup_logging replaces root handlers, put the originals back"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def reset_structured_logger():
    """Bound loggers keep the stderr stream of the test that created them"""
    yield
    logger_module._global_logger = None

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from web_automation.browser.dispatcher import ToolDispatcher
from web_automation.browser.manager import BrowserManager
from web_automation.config import ServerConfig

PAGE_COROUTINES = (
    "goto", "click", "type", "select_option", "hover", "evaluate",
    "eval_on_selector", "eval_on_selector_all", "screenshot", "query_selector",
    "wait_for_selector", "go_back", "go_forward", "reload", "content",
    "check", "uncheck", "close", "bring_to_front",
)


def make_page(context, url="about:blank"):
    page = MagicMock()
    page.url = url
    page.context = context
    for name in PAGE_COROUTINES:
        setattr(page, name, AsyncMock())
    page.keyboard.press = AsyncMock()
    return page


class FakePlaywright:
    """Stands in for async_playwright() and records what a launch creates."""

    def __init__(self):
        self.starts = 0
        self.pages = []

        self.context = MagicMock()
        self.context.new_page = AsyncMock(side_effect=self._new_page)
        self.context.close = AsyncMock()
        self.context.cookies = AsyncMock(return_value=[])
        self.context.add_cookies = AsyncMock()
        self.context.clear_cookies = AsyncMock()

        self.browser = MagicMock()
        self.browser.new_context = AsyncMock(return_value=self.context)
        self.browser.close = AsyncMock()

        self.driver = MagicMock()
        for engine in ("chromium", "firefox", "webkit"):
            getattr(self.driver, engine).launch = AsyncMock(return_value=self.browser)
        self.driver.stop = AsyncMock()

    def _new_page(self):
        page = make_page(self.context)
        self.pages.append(page)
        return page

    def __call__(self):
        return self

    async def start(self):
        self.starts += 1
        return self.driver


def reply(envelope) -> str:
    assert len(envelope["content"]) == 1
    assert envelope["content"][0]["type"] == "text"
    return envelope["content"][0]["text"]


@pytest.fixture
def engine():
    return FakePlaywright()


@pytest.fixture
def config(tmp_path):
    return ServerConfig(screenshot_dir=tmp_path)


@pytest.fixture
def manager(engine, config):
    return BrowserManager(config, playwright_factory=engine)


@pytest.fixture
def dispatcher(manager):
    return ToolDispatcher(manager)

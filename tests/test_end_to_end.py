"""
Real-browser checks. They need Playwright browsers and network access, so
they only run with WEB_AUTOMATION_E2E=1.
"""
import os

import pytest

from conftest import reply
from web_automation.browser.dispatcher import ToolDispatcher
from web_automation.browser.manager import BrowserManager
from web_automation.config import ServerConfig

pytestmark = pytest.mark.skipif(
    os.environ.get("WEB_AUTOMATION_E2E") != "1",
    reason="set WEB_AUTOMATION_E2E=1 to drive a real browser",
)


@pytest.fixture
def live_dispatcher(tmp_path):
    return ToolDispatcher(BrowserManager(ServerConfig(screenshot_dir=tmp_path)))


class TestRealBrowser:
    @pytest.mark.asyncio
    async def test_example_domain(self, live_dispatcher):
        try:
            assert reply(await live_dispatcher.execute("launch_browser", {"headless": True})) == "Browser launched successfully"
            text = reply(await live_dispatcher.execute("navigate", {"url": "https://example.com"}))
            assert text == "Navigated to https://example.com"
            content = reply(await live_dispatcher.execute("get_page_content", {}))
            assert "Example Domain" in content
            assert reply(await live_dispatcher.execute("get_text", {"selector": "h1"})) == "Example Domain"
        finally:
            await live_dispatcher.execute("close_browser", {})

    @pytest.mark.asyncio
    async def test_tabs_fall_back_to_main(self, live_dispatcher):
        try:
            await live_dispatcher.execute("launch_browser", {"headless": True})
            await live_dispatcher.execute("new_tab", {"tab_id": "t2", "url": "https://example.com"})
            assert reply(await live_dispatcher.execute("switch_tab", {"tab_id": "t2"})) == "Switched to tab t2"
            assert reply(await live_dispatcher.execute("close_tab", {"tab_id": "t2"})) == "Tab t2 closed"
            assert live_dispatcher.manager.tabs.active_id == "main"
        finally:
            await live_dispatcher.execute("close_browser", {})

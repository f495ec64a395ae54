"""
BrowserManager - session and tab state for one tool-call client.

Holds at most one BrowserSession and the TabRegistry of its pages. It is an
explicit context object: tests and embedders can create as many independent
managers as they need.
"""
from typing import Any, Callable, Optional

from ..config import ServerConfig
from ..logging_config import get_logger
from .errors import AlreadyRunningError, NoSessionError, TabExistsError
from .models import LaunchOptions, SessionState
from .session import BrowserSession
from .tabs import TabRegistry

logger = get_logger("web_automation.browser.manager")

MAIN_TAB_ID = "main"


class BrowserManager:
    """Launches, tracks and closes the browser session and its tabs."""

    def __init__(
        self,
        config: Optional[ServerConfig] = None,
        playwright_factory: Optional[Callable[[], Any]] = None,
    ):
        self.config = config or ServerConfig()
        self.session: Optional[BrowserSession] = None
        self.tabs = TabRegistry()
        self._playwright_factory = playwright_factory

    @property
    def state(self) -> SessionState:
        return SessionState.RUNNING if self.session else SessionState.ABSENT

    # ==================== Session Lifecycle ====================

    async def launch(self, headless: bool = False, viewport_width: int = 1920, viewport_height: int = 1080):
        """Launch the browser and open the "main" tab as the active tab.

        Raises:
            AlreadyRunningError: If a session exists. The session is left untouched.
        """
        if self.session:
            raise AlreadyRunningError()

        options = LaunchOptions(
            headless=headless,
            viewport_width=viewport_width,
            viewport_height=viewport_height,
            browser_type=self.config.browser_type,
            timeout_ms=self.config.default_timeout_ms,
        )
        session = await BrowserSession.launch(options, self._playwright_factory)
        try:
            page = await session.new_page()
        except Exception:
            await session.close()
            raise

        self.session = session
        self.tabs.clear()
        self.tabs.add(MAIN_TAB_ID, page)
        self.tabs.activate(MAIN_TAB_ID)
        logger.info_with("Browser session started", state=self.state.value, **self.tabs.to_dict())

    async def close(self) -> bool:
        """Close the browser and forget every tab. Returns False if nothing was running."""
        if not self.session:
            return False

        session = self.session
        self.session = None
        self.tabs.clear()
        await session.close()
        logger.info_with("Browser session ended", state=self.state.value)
        return True

    # ==================== Tabs ====================

    def require_session(self) -> BrowserSession:
        if not self.session:
            raise NoSessionError()
        return self.session

    def require_active_page(self) -> Any:
        """Page of the active tab; raises NoActivePageError when there is none."""
        return self.tabs.active_page

    async def open_tab(self, tab_id: Optional[str] = None, url: Optional[str] = None) -> str:
        """Open and register a new tab, optionally navigating it.

        The active tab only changes when no tab was active.
        """
        session = self.require_session()
        if tab_id and tab_id in self.tabs:
            raise TabExistsError(tab_id)
        tab_id = tab_id or self.tabs.new_id()
        page = await session.new_page()
        self.tabs.add(tab_id, page)
        logger.info_with(f"Opened tab {tab_id}", **self.tabs.to_dict())

        if url:
            await page.goto(url)
        return tab_id

    async def switch_tab(self, tab_id: str):
        tab = self.tabs.activate(tab_id)
        await tab.page.bring_to_front()
        logger.debug_with(f"Switched to tab {tab_id}", **self.tabs.to_dict())

    async def close_tab(self, tab_id: str = MAIN_TAB_ID):
        tab = self.tabs.get(tab_id)
        await tab.page.close()
        self.tabs.remove(tab_id)
        logger.info_with(f"Closed tab {tab_id}, active tab is now {self.tabs.active_id}", **self.tabs.to_dict())

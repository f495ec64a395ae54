"""
Browser session handle: one running Playwright driver, browser and context.
"""
from typing import Any, Callable, Optional

from ..logging_config import get_logger
from .models import LaunchOptions

logger = get_logger("web_automation.browser.session")


def _default_playwright_factory():
    from playwright.async_api import async_playwright
    return async_playwright()


class BrowserSession:
    """Owns the engine objects of a launched browser."""

    def __init__(self, playwright: Any, browser: Any, context: Any, options: LaunchOptions):
        self.playwright = playwright
        self.browser = browser
        self.context = context
        self.options = options

    @classmethod
    async def launch(
        cls,
        options: LaunchOptions,
        playwright_factory: Optional[Callable[[], Any]] = None,
    ) -> "BrowserSession":
        """Start Playwright, launch a browser and open a context sized to the viewport.

        Anything already started is torn down again if a later step fails.
        """
        factory = playwright_factory or _default_playwright_factory
        playwright = await factory().start()
        browser = None
        try:
            launcher = getattr(playwright, options.browser_type.value)
            browser = await launcher.launch(headless=options.headless)
            context = await browser.new_context(
                viewport={
                    "width": options.viewport_width,
                    "height": options.viewport_height,
                },
            )
            context.set_default_timeout(options.timeout_ms)
        except Exception:
            if browser is not None:
                try:
                    await browser.close()
                except Exception as e:
                    logger.warning_with(f"Error closing browser after failed launch: {e}", error=str(e))
            await playwright.stop()
            raise

        logger.info(
            f"Launched {options.browser_type.value} "
            f"(headless={options.headless}, viewport={options.viewport_width}x{options.viewport_height})"
        )
        return cls(playwright, browser, context, options)

    async def new_page(self) -> Any:
        return await self.context.new_page()

    async def close(self):
        """Release the context, browser and driver, continuing past individual failures."""
        for name, closer in (
            ("context", self.context.close),
            ("browser", self.browser.close),
            ("playwright", self.playwright.stop),
        ):
            try:
                await closer()
            except Exception as e:
                logger.error_with(f"Error closing {name}: {e}", resource=name, error=str(e))
        logger.info("Browser session closed")

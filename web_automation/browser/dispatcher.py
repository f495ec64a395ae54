"""
Tool dispatcher: runs one named operation against the browser manager.

Every call returns a text envelope. Failures never escape: they come back as
envelope text starting with "Error: ".
"""
import asyncio
import json
import time
from typing import Any, Awaitable, Callable, Dict, List, Optional

from pydantic import ValidationError

from ..logging_config import get_logger
from .errors import AlreadyRunningError, InvalidArgumentsError, UnknownOperationError
from .manager import BrowserManager
from .operations import (
    ARGUMENT_MODELS,
    ClickArgs,
    CloseTabArgs,
    ExecuteJavascriptArgs,
    ExtractLinksArgs,
    ExtractTableArgs,
    FillFormArgs,
    GetTextArgs,
    HoverArgs,
    LaunchBrowserArgs,
    NavigateArgs,
    NewTabArgs,
    Operation,
    PressKeyArgs,
    ScrollArgs,
    SelectOptionArgs,
    SetCookieArgs,
    SwitchTabArgs,
    TakeScreenshotArgs,
    ToolArgs,
    TypeTextArgs,
    WaitArgs,
    WaitForElementArgs,
)

logger = get_logger("web_automation.browser.dispatcher")

Envelope = Dict[str, List[Dict[str, str]]]
Handler = Callable[[Any], Awaitable[str]]

# Playwright has a single network idle state for both puppeteer variants
WAIT_UNTIL_STATES = {
    "load": "load",
    "domcontentloaded": "domcontentloaded",
    "networkidle0": "networkidle",
    "networkidle2": "networkidle",
}

TEXT_CONTENT_JS = "(el) => el.textContent?.trim() || ''"
ALL_TEXT_CONTENT_JS = "(elements) => elements.map((el) => el.textContent?.trim() || '')"

EXTRACT_LINKS_JS = """
(filter) => {
  const anchors = Array.from(document.querySelectorAll('a'));
  return anchors
    .map((a) => ({ text: a.textContent?.trim() || '', href: a.href }))
    .filter((link) =>
      filter ? link.href.includes(filter) || link.text.includes(filter) : true
    );
}
"""

EXTRACT_TABLE_JS = """
({ selector, includeHeaders }) => {
  const table = document.querySelector(selector);
  if (!table) return null;

  const data = [];
  if (includeHeaders) {
    const headers = Array.from(table.querySelectorAll('th')).map(
      (th) => th.textContent?.trim() || ''
    );
    if (headers.length > 0) data.push(headers);
  }

  for (const row of Array.from(table.querySelectorAll('tr'))) {
    const cells = Array.from(row.querySelectorAll('td'));
    if (cells.length > 0) data.push(cells.map((td) => td.textContent?.trim() || ''));
  }
  return data;
}
"""

SCROLL_TOP_JS = "() => window.scrollTo(0, 0)"
SCROLL_BOTTOM_JS = "() => window.scrollTo(0, document.body.scrollHeight)"
SCROLL_BY_JS = "(amount) => window.scrollBy(0, amount)"


def text_envelope(text: str) -> Envelope:
    return {"content": [{"type": "text", "text": text}]}


def to_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


def _format_validation_error(name: str, error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ())) or "arguments"
        problems.append(f"{location}: {item.get('msg', 'invalid value')}")
    return f"Invalid arguments for {name}: " + "; ".join(problems)


class ToolDispatcher:
    """Maps tool names to handlers and runs them one at a time."""

    def __init__(self, manager: BrowserManager):
        self.manager = manager
        self._lock = asyncio.Lock()
        self._handlers: Dict[Operation, Handler] = {
            Operation.LAUNCH_BROWSER: self._launch_browser,
            Operation.CLOSE_BROWSER: self._close_browser,
            Operation.NAVIGATE: self._navigate,
            Operation.CLICK: self._click,
            Operation.TYPE_TEXT: self._type_text,
            Operation.GET_TEXT: self._get_text,
            Operation.TAKE_SCREENSHOT: self._take_screenshot,
            Operation.WAIT_FOR_ELEMENT: self._wait_for_element,
            Operation.EXECUTE_JAVASCRIPT: self._execute_javascript,
            Operation.GO_BACK: self._go_back,
            Operation.GO_FORWARD: self._go_forward,
            Operation.REFRESH: self._refresh,
            Operation.GET_PAGE_CONTENT: self._get_page_content,
            Operation.SELECT_OPTION: self._select_option,
            Operation.HOVER: self._hover,
            Operation.PRESS_KEY: self._press_key,
            Operation.SCROLL: self._scroll,
            Operation.WAIT: self._wait,
            Operation.GET_COOKIES: self._get_cookies,
            Operation.SET_COOKIE: self._set_cookie,
            Operation.CLEAR_COOKIES: self._clear_cookies,
            Operation.NEW_TAB: self._new_tab,
            Operation.SWITCH_TAB: self._switch_tab,
            Operation.CLOSE_TAB: self._close_tab,
            Operation.FILL_FORM: self._fill_form,
            Operation.EXTRACT_LINKS: self._extract_links,
            Operation.EXTRACT_TABLE: self._extract_table,
        }

    async def execute(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> Envelope:
        """Run a tool and wrap its reply, or its error, in a text envelope."""
        async with self._lock:
            start = time.monotonic()
            failed = False
            try:
                text = await self._run(name, arguments or {})
            except Exception as e:
                failed = True
                message = str(e) or e.__class__.__name__
                logger.warning_with(f"Tool {name} failed: {message}", tool=name, error=message)
                text = f"Error: {message}"
            duration_ms = (time.monotonic() - start) * 1000

        logger.info_with(
            f"Tool {name} finished in {duration_ms:.1f}ms",
            tool=name,
            duration_ms=round(duration_ms, 1),
            failed=failed,
        )
        return text_envelope(text)

    async def _run(self, name: str, arguments: Dict[str, Any]) -> str:
        try:
            operation = Operation(name)
        except ValueError:
            raise UnknownOperationError(name)

        try:
            args = ARGUMENT_MODELS[operation].model_validate(arguments)
        except ValidationError as e:
            raise InvalidArgumentsError(_format_validation_error(name, e))

        return await self._handlers[operation](args)

    def _page(self):
        return self.manager.require_active_page()

    # ==================== Session ====================

    async def _launch_browser(self, args: LaunchBrowserArgs) -> str:
        try:
            await self.manager.launch(
                headless=args.headless,
                viewport_width=args.viewport_width,
                viewport_height=args.viewport_height,
            )
        except AlreadyRunningError as e:
            return str(e)
        return "Browser launched successfully"

    async def _close_browser(self, args: ToolArgs) -> str:
        if not await self.manager.close():
            return "No browser is running"
        return "Browser closed successfully"

    # ==================== Navigation ====================

    async def _navigate(self, args: NavigateArgs) -> str:
        page = self._page()
        await page.goto(args.url, wait_until=WAIT_UNTIL_STATES[args.wait_until])
        return f"Navigated to {args.url}"

    async def _go_back(self, args: ToolArgs) -> str:
        await self._page().go_back()
        return "Navigated back"

    async def _go_forward(self, args: ToolArgs) -> str:
        await self._page().go_forward()
        return "Navigated forward"

    async def _refresh(self, args: ToolArgs) -> str:
        await self._page().reload()
        return "Page refreshed"

    # ==================== Interaction ====================

    async def _click(self, args: ClickArgs) -> str:
        page = self._page()
        await page.click(args.selector, click_count=args.click_count, delay=args.delay)
        return f"Clicked {args.selector}"

    async def _type_text(self, args: TypeTextArgs) -> str:
        page = self._page()
        if args.clear_first:
            # triple click selects the existing value so typing replaces it
            await page.click(args.selector, click_count=3)
        await page.type(args.selector, args.text, delay=args.delay)
        return f"Typed text into {args.selector}"

    async def _select_option(self, args: SelectOptionArgs) -> str:
        await self._page().select_option(args.selector, args.value)
        return f"Selected {args.value} in {args.selector}"

    async def _hover(self, args: HoverArgs) -> str:
        await self._page().hover(args.selector)
        return f"Hovered over {args.selector}"

    async def _press_key(self, args: PressKeyArgs) -> str:
        await self._page().keyboard.press(args.key)
        return f"Pressed {args.key}"

    async def _scroll(self, args: ScrollArgs) -> str:
        page = self._page()
        if args.direction is None:
            return "No scroll direction given"

        if args.direction == "top":
            await page.evaluate(SCROLL_TOP_JS)
        elif args.direction == "bottom":
            await page.evaluate(SCROLL_BOTTOM_JS)
        elif args.amount:
            amount = args.amount if args.direction == "down" else -args.amount
            await page.evaluate(SCROLL_BY_JS, amount)
        return f"Scrolled {args.direction}"

    async def _wait(self, args: WaitArgs) -> str:
        await asyncio.sleep(args.duration / 1000)
        duration = int(args.duration) if args.duration.is_integer() else args.duration
        return f"Waited {duration}ms"

    async def _fill_form(self, args: FillFormArgs) -> str:
        page = self._page()
        for field in args.fields:
            if field.type == "text":
                await page.type(field.selector, field.value)
            elif field.type == "select":
                await page.select_option(field.selector, field.value)
            elif field.type == "checkbox":
                if field.value == "true":
                    await page.check(field.selector)
                else:
                    await page.uncheck(field.selector)
            elif field.type == "radio":
                await page.click(field.selector)
            else:
                logger.debug_with(f"Skipping form field {field.selector} without a type", selector=field.selector)
        return "Form filled successfully"

    # ==================== Extraction ====================

    async def _get_text(self, args: GetTextArgs) -> str:
        page = self._page()
        if args.all:
            texts = await page.eval_on_selector_all(args.selector, ALL_TEXT_CONTENT_JS)
            return to_json(texts)
        return await page.eval_on_selector(args.selector, TEXT_CONTENT_JS)

    async def _take_screenshot(self, args: TakeScreenshotArgs) -> str:
        page = self._page()
        path = self.manager.config.resolve_screenshot_path(args.filename)
        path.parent.mkdir(parents=True, exist_ok=True)

        if args.selector:
            element = await page.query_selector(args.selector)
            if element is None:
                raise ValueError(f"Element {args.selector} not found")
            await element.screenshot(path=str(path))
        else:
            await page.screenshot(path=str(path), full_page=args.full_page)
        return f"Screenshot saved to {path}"

    async def _wait_for_element(self, args: WaitForElementArgs) -> str:
        await self._page().wait_for_selector(args.selector, timeout=args.timeout)
        return f"Element {args.selector} appeared"

    async def _execute_javascript(self, args: ExecuteJavascriptArgs) -> str:
        result = await self._page().evaluate(args.script)
        return to_json(result)

    async def _get_page_content(self, args: ToolArgs) -> str:
        return await self._page().content()

    async def _extract_links(self, args: ExtractLinksArgs) -> str:
        links = await self._page().evaluate(EXTRACT_LINKS_JS, args.filter)
        return to_json(links)

    async def _extract_table(self, args: ExtractTableArgs) -> str:
        table = await self._page().evaluate(
            EXTRACT_TABLE_JS,
            {"selector": args.selector, "includeHeaders": args.include_headers},
        )
        return to_json(table)

    # ==================== Cookies ====================

    async def _get_cookies(self, args: ToolArgs) -> str:
        page = self._page()
        if page.url.startswith(("http://", "https://")):
            cookies = await page.context.cookies(page.url)
        else:
            cookies = await page.context.cookies()
        return to_json(cookies)

    async def _set_cookie(self, args: SetCookieArgs) -> str:
        page = self._page()
        cookie = {"name": args.name, "value": args.value}
        if args.domain:
            cookie["domain"] = args.domain
            cookie["path"] = "/"
        else:
            cookie["url"] = page.url
        await page.context.add_cookies([cookie])
        return f"Cookie {args.name} set"

    async def _clear_cookies(self, args: ToolArgs) -> str:
        await self._page().context.clear_cookies()
        return "All cookies cleared"

    # ==================== Tabs ====================

    async def _new_tab(self, args: NewTabArgs) -> str:
        tab_id = await self.manager.open_tab(args.tab_id, args.url)
        return f"New tab opened with ID: {tab_id}"

    async def _switch_tab(self, args: SwitchTabArgs) -> str:
        await self.manager.switch_tab(args.tab_id)
        return f"Switched to tab {args.tab_id}"

    async def _close_tab(self, args: CloseTabArgs) -> str:
        await self.manager.close_tab(args.tab_id)
        return f"Tab {args.tab_id} closed"

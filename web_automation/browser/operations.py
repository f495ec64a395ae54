"""
Tool operations and their argument models.

Each model's docstring is the tool description shown to clients and its
fields (with defaults) are the tool's input schema.
"""
from enum import Enum
from typing import Dict, List, Literal, Optional, Type

from pydantic import BaseModel, ConfigDict, Field


class Operation(str, Enum):
    LAUNCH_BROWSER = "launch_browser"
    CLOSE_BROWSER = "close_browser"
    NAVIGATE = "navigate"
    CLICK = "click"
    TYPE_TEXT = "type_text"
    GET_TEXT = "get_text"
    TAKE_SCREENSHOT = "take_screenshot"
    WAIT_FOR_ELEMENT = "wait_for_element"
    EXECUTE_JAVASCRIPT = "execute_javascript"
    GO_BACK = "go_back"
    GO_FORWARD = "go_forward"
    REFRESH = "refresh"
    GET_PAGE_CONTENT = "get_page_content"
    SELECT_OPTION = "select_option"
    HOVER = "hover"
    PRESS_KEY = "press_key"
    SCROLL = "scroll"
    WAIT = "wait"
    GET_COOKIES = "get_cookies"
    SET_COOKIE = "set_cookie"
    CLEAR_COOKIES = "clear_cookies"
    NEW_TAB = "new_tab"
    SWITCH_TAB = "switch_tab"
    CLOSE_TAB = "close_tab"
    FILL_FORM = "fill_form"
    EXTRACT_LINKS = "extract_links"
    EXTRACT_TABLE = "extract_table"


class ToolArgs(BaseModel):
    model_config = ConfigDict(extra="ignore")


# ==================== Session ====================

class LaunchBrowserArgs(ToolArgs):
    """Launch a new browser instance"""
    headless: bool = Field(False, description="Run in headless mode")
    viewport_width: int = Field(1920, ge=1)
    viewport_height: int = Field(1080, ge=1)


class CloseBrowserArgs(ToolArgs):
    """Close the browser"""


# ==================== Navigation ====================

class NavigateArgs(ToolArgs):
    """Navigate to a URL"""
    url: str = Field(..., min_length=1, description="The URL to navigate to")
    wait_until: Literal["load", "domcontentloaded", "networkidle0", "networkidle2"] = "networkidle2"


class GoBackArgs(ToolArgs):
    """Go back in browser history"""


class GoForwardArgs(ToolArgs):
    """Go forward in browser history"""


class RefreshArgs(ToolArgs):
    """Refresh the current page"""


# ==================== Interaction ====================

class ClickArgs(ToolArgs):
    """Click an element"""
    selector: str = Field(..., description="CSS selector of element to click")
    click_count: int = Field(1, ge=1)
    delay: float = Field(0, ge=0)


class TypeTextArgs(ToolArgs):
    """Type text into an input field"""
    selector: str = Field(..., description="CSS selector of input field")
    text: str = Field(..., description="Text to type")
    clear_first: bool = False
    delay: float = Field(0, ge=0)


class SelectOptionArgs(ToolArgs):
    """Select an option from a dropdown"""
    selector: str
    value: str


class HoverArgs(ToolArgs):
    """Hover over an element"""
    selector: str


class PressKeyArgs(ToolArgs):
    """Press a keyboard key"""
    key: str


class ScrollArgs(ToolArgs):
    """Scroll the page"""
    direction: Optional[Literal["up", "down", "top", "bottom"]] = None
    amount: Optional[float] = None


class WaitArgs(ToolArgs):
    """Wait for a specified duration"""
    duration: float = Field(..., ge=0, description="Duration in milliseconds")


class FormField(BaseModel):
    selector: str
    value: str = ""
    type: Optional[Literal["text", "select", "checkbox", "radio"]] = None


class FillFormArgs(ToolArgs):
    """Fill multiple form fields at once"""
    fields: List[FormField]


# ==================== Extraction ====================

class GetTextArgs(ToolArgs):
    """Get text content from elements"""
    selector: str = Field(..., description="CSS selector")
    all: bool = Field(False, description="Get all matching elements")


class TakeScreenshotArgs(ToolArgs):
    """Take a screenshot"""
    filename: str = Field(..., min_length=1, description="File name to save screenshot")
    full_page: bool = False
    selector: Optional[str] = Field(None, description="CSS selector to screenshot specific element")


class WaitForElementArgs(ToolArgs):
    """Wait for an element to appear"""
    selector: str = Field(..., description="CSS selector to wait for")
    timeout: float = Field(30000, ge=0)


class ExecuteJavascriptArgs(ToolArgs):
    """Execute custom JavaScript in the page"""
    script: str = Field(..., description="JavaScript code to execute")


class GetPageContentArgs(ToolArgs):
    """Get the entire page HTML content"""


class ExtractLinksArgs(ToolArgs):
    """Extract all links from the page"""
    filter: Optional[str] = None


class ExtractTableArgs(ToolArgs):
    """Extract data from a table"""
    selector: str
    include_headers: bool = True


# ==================== Cookies ====================

class GetCookiesArgs(ToolArgs):
    """Get cookies from current page"""


class SetCookieArgs(ToolArgs):
    """Set a cookie"""
    name: str
    value: str
    domain: Optional[str] = None


class ClearCookiesArgs(ToolArgs):
    """Clear all cookies"""


# ==================== Tabs ====================

class NewTabArgs(ToolArgs):
    """Open a new tab"""
    tab_id: Optional[str] = None
    url: Optional[str] = None


class SwitchTabArgs(ToolArgs):
    """Switch to a different tab"""
    tab_id: str


class CloseTabArgs(ToolArgs):
    """Close a tab"""
    tab_id: str = "main"


ARGUMENT_MODELS: Dict[Operation, Type[ToolArgs]] = {
    Operation.LAUNCH_BROWSER: LaunchBrowserArgs,
    Operation.CLOSE_BROWSER: CloseBrowserArgs,
    Operation.NAVIGATE: NavigateArgs,
    Operation.CLICK: ClickArgs,
    Operation.TYPE_TEXT: TypeTextArgs,
    Operation.GET_TEXT: GetTextArgs,
    Operation.TAKE_SCREENSHOT: TakeScreenshotArgs,
    Operation.WAIT_FOR_ELEMENT: WaitForElementArgs,
    Operation.EXECUTE_JAVASCRIPT: ExecuteJavascriptArgs,
    Operation.GO_BACK: GoBackArgs,
    Operation.GO_FORWARD: GoForwardArgs,
    Operation.REFRESH: RefreshArgs,
    Operation.GET_PAGE_CONTENT: GetPageContentArgs,
    Operation.SELECT_OPTION: SelectOptionArgs,
    Operation.HOVER: HoverArgs,
    Operation.PRESS_KEY: PressKeyArgs,
    Operation.SCROLL: ScrollArgs,
    Operation.WAIT: WaitArgs,
    Operation.GET_COOKIES: GetCookiesArgs,
    Operation.SET_COOKIE: SetCookieArgs,
    Operation.CLEAR_COOKIES: ClearCookiesArgs,
    Operation.NEW_TAB: NewTabArgs,
    Operation.SWITCH_TAB: SwitchTabArgs,
    Operation.CLOSE_TAB: CloseTabArgs,
    Operation.FILL_FORM: FillFormArgs,
    Operation.EXTRACT_LINKS: ExtractLinksArgs,
    Operation.EXTRACT_TABLE: ExtractTableArgs,
}

"""
Browser automation errors.

Every error carries the exact text reported back to the tool caller.
"""


class BrowserError(Exception):
    """Base exception for browser automation errors"""
    pass


class NoSessionError(BrowserError):
    """No browser session is running"""
    def __init__(self):
        super().__init__("No browser is running")


class AlreadyRunningError(BrowserError):
    """A browser session already exists"""
    def __init__(self):
        super().__init__("Browser is already running")


class NoActivePageError(BrowserError):
    """No tab is active to receive page commands"""
    def __init__(self):
        super().__init__("No browser is running. Please launch a browser first.")


class TabNotFoundError(BrowserError):
    """Tab id is not registered"""
    def __init__(self, tab_id: str):
        self.tab_id = tab_id
        super().__init__(f"Tab {tab_id} not found")


class TabExistsError(BrowserError):
    """Tab id is already registered"""
    def __init__(self, tab_id: str):
        self.tab_id = tab_id
        super().__init__(f"Tab {tab_id} already exists")


class UnknownOperationError(BrowserError):
    """Tool name has no handler"""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class InvalidArgumentsError(BrowserError):
    """Tool arguments failed validation"""
    pass

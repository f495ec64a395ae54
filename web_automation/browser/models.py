"""
Browser automation data models.
"""
import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict


class SessionState(Enum):
    ABSENT = "absent"
    RUNNING = "running"


class BrowserType(Enum):
    CHROMIUM = "chromium"
    FIREFOX = "firefox"
    WEBKIT = "webkit"


@dataclass
class LaunchOptions:
    """Options for launching the browser session."""
    headless: bool = False
    viewport_width: int = 1920
    viewport_height: int = 1080
    browser_type: BrowserType = BrowserType.CHROMIUM
    timeout_ms: int = 30000


@dataclass
class Tab:
    """A browsing context registered under a tab id."""
    id: str
    page: Any
    order: int = 0
    created_at: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "url": getattr(self.page, "url", ""),
            "order": self.order,
            "created_at": self.created_at,
        }


def generate_tab_id(sequence: int) -> str:
    """Build a tab id from the wall clock and a per-session sequence number."""
    return f"tab_{int(time.time() * 1000)}_{sequence}"

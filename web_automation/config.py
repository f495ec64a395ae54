"""
Server configuration.

Values come from WEB_AUTOMATION_* environment variables and can be
overridden from the command line.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

from .browser.models import BrowserType


DEFAULT_TIMEOUT_MS = 30000


@dataclass
class ServerConfig:
    """Settings shared by every browser session the server launches."""
    browser_type: BrowserType = BrowserType.CHROMIUM
    default_timeout_ms: int = DEFAULT_TIMEOUT_MS
    screenshot_dir: Path = field(default_factory=Path.cwd)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "browser_type": self.browser_type.value,
            "default_timeout_ms": self.default_timeout_ms,
            "screenshot_dir": str(self.screenshot_dir),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ServerConfig":
        data = data.copy()
        if "browser_type" in data and isinstance(data["browser_type"], str):
            data["browser_type"] = BrowserType(data["browser_type"])
        if "screenshot_dir" in data:
            data["screenshot_dir"] = Path(data["screenshot_dir"]).expanduser()
        return cls(**data)

    @classmethod
    def from_env(cls) -> "ServerConfig":
        data: Dict[str, Any] = {}

        browser = os.environ.get("WEB_AUTOMATION_BROWSER", "").strip().lower()
        if browser:
            data["browser_type"] = browser

        timeout = os.environ.get("WEB_AUTOMATION_TIMEOUT_MS", "").strip()
        if timeout:
            try:
                data["default_timeout_ms"] = int(timeout)
            except ValueError:
                raise ValueError(f"WEB_AUTOMATION_TIMEOUT_MS must be an integer, got {timeout!r}")

        screenshot_dir = os.environ.get("WEB_AUTOMATION_SCREENSHOT_DIR", "").strip()
        if screenshot_dir:
            data["screenshot_dir"] = screenshot_dir

        return cls.from_dict(data)

    def resolve_screenshot_path(self, filename: str) -> Path:
        path = Path(filename).expanduser()
        if not path.is_absolute():
            path = self.screenshot_dir / path
        return path

"""
MCP stdio server exposing the browser tools.
"""
from typing import Any, Dict, List, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from . import __version__
from .browser.dispatcher import ToolDispatcher
from .browser.manager import BrowserManager
from .config import ServerConfig
from .logging_config import get_logger
from .tools import tool_definitions

logger = get_logger("web_automation.server")

SERVER_NAME = "web-automation-mcp"


class WebAutomationServer:
    """Binds the tool dispatcher to an MCP server."""

    def __init__(self, config: Optional[ServerConfig] = None, manager: Optional[BrowserManager] = None):
        self.manager = manager or BrowserManager(config)
        self.dispatcher = ToolDispatcher(self.manager)
        self.server = Server(SERVER_NAME, version=__version__)

        self.server.list_tools()(self.list_tools)
        # Arguments are validated by the dispatcher so that bad input is
        # reported in-band like every other failure.
        self.server.call_tool(validate_input=False)(self.call_tool)

    async def list_tools(self) -> List[Tool]:
        return tool_definitions()

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> List[TextContent]:
        envelope = await self.dispatcher.execute(name, arguments)
        return [
            TextContent(type="text", text=item["text"])
            for item in envelope["content"]
        ]

    async def run(self):
        """Serve on stdin/stdout until the client disconnects, then close the browser."""
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Web Automation MCP server running on stdio")
            try:
                await self.server.run(
                    read_stream, write_stream, self.server.create_initialization_options()
                )
            finally:
                if await self.manager.close():
                    logger.info("Closed browser left open by the client")

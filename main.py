#!/usr/bin/env python3
"""
Web Automation MCP - browser automation tools for MCP clients

Runs a stdio MCP server that drives a Playwright browser: navigation, clicks,
typing, scraping, screenshots, cookies and tabs.
"""
import asyncio
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from web_automation import __version__

console = Console()
# stdout belongs to the MCP protocol while serving
err_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__, prog_name="web-automation-mcp")
def cli():
    """Web Automation MCP - browser automation over the Model Context Protocol"""
    pass


@cli.command()
@click.option("--log-level", default=None, help="Log level (also: WEB_AUTOMATION_LOG_LEVEL)")
@click.option("--json-logs", is_flag=True, default=False, help="Emit JSON log lines (also: WEB_AUTOMATION_LOG_JSON=1)")
@click.option("--log-file", default=None, help="Also write logs to this file (also: WEB_AUTOMATION_LOG_FILE)")
@click.option(
    "--browser",
    type=click.Choice(["chromium", "firefox", "webkit"]),
    default=None,
    help="Browser engine to launch (also: WEB_AUTOMATION_BROWSER)",
)
@click.option("--timeout-ms", type=int, default=None, help="Default engine timeout (also: WEB_AUTOMATION_TIMEOUT_MS)")
@click.option(
    "--screenshot-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for relative screenshot paths (also: WEB_AUTOMATION_SCREENSHOT_DIR)",
)
def serve(log_level, json_logs, log_file, browser, timeout_ms, screenshot_dir):
    """Run the MCP server on stdio"""
    from web_automation.config import ServerConfig
    from web_automation.logging_config import setup_logging
    from web_automation.server import WebAutomationServer

    setup_logging(level=log_level, json_format=True if json_logs else None, log_file=log_file)

    try:
        config = ServerConfig.from_env()
    except ValueError as e:
        raise click.BadParameter(str(e))

    overrides = {}
    if browser:
        overrides["browser_type"] = browser
    if timeout_ms is not None:
        overrides["default_timeout_ms"] = timeout_ms
    if screenshot_dir is not None:
        overrides["screenshot_dir"] = screenshot_dir
    if overrides:
        config = ServerConfig.from_dict({**config.to_dict(), **overrides})

    err_console.print(f"[bold cyan]Web Automation MCP[/bold cyan] v{__version__} [dim]({config.browser_type.value}, stdio)[/dim]")

    try:
        asyncio.run(WebAutomationServer(config).run())
    except KeyboardInterrupt:
        err_console.print("[dim]Stopped[/dim]")


@cli.command()
def tools():
    """List the tools the server exposes"""
    from web_automation.tools import tool_definitions

    table = Table(title="Web Automation Tools")
    table.add_column("Tool", style="cyan")
    table.add_column("Description", style="white")
    table.add_column("Required", style="yellow")
    table.add_column("Optional", style="dim")

    for tool in tool_definitions():
        properties = tool.inputSchema.get("properties", {})
        required = tool.inputSchema.get("required", [])
        optional = [name for name in properties if name not in required]
        table.add_row(tool.name, tool.description or "", ", ".join(required), ", ".join(optional))

    console.print(table)


@cli.command()
def version():
    """Show version information"""
    console.print(f"[bold cyan]Web Automation MCP[/bold cyan] v{__version__}")


if __name__ == "__main__":
    cli()

"""
Browser automation for Web Automation MCP.

Provides Playwright-based browser control with:
- A single browser session per manager, launched and closed on demand
- Named tabs with one active tab receiving page-scoped commands
- A dispatcher that turns tool calls into page commands and text replies
"""

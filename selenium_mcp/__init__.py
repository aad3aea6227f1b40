"""Selenium WebDriver automation exposed as MCP-style tools."""

__version__ = "0.1.0"

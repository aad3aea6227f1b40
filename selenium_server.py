#!/usr/bin/env python3
"""
Selenium MCP server launcher
Runs the stdio transport by default, or the SSE transport with --port
"""

from selenium_mcp.main import main


if __name__ == "__main__":
    main()

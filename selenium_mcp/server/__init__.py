from selenium_mcp.server.base import MCPServer
from selenium_mcp.server.stdio import StdioServer


__all__ = ["MCPServer", "StdioServer"]

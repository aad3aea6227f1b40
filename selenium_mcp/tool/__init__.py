from selenium_mcp.tool.base import BaseTool, ToolResult
from selenium_mcp.tool.catalog import create_tool_collection
from selenium_mcp.tool.tool_collection import ToolCollection


__all__ = [
    "BaseTool",
    "ToolResult",
    "ToolCollection",
    "create_tool_collection",
]

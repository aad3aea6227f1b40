"""Collection classes for managing multiple tools."""

from typing import Any, Dict, List, Optional

from selenium_mcp.tool.base import BaseTool
from selenium_mcp.utils.logger import logger


class ToolCollection:
    """A collection of defined tools, keyed by name."""

    def __init__(self, *tools: BaseTool):
        self.tools = tuple(tools)
        self.tool_map = {tool.name: tool for tool in tools}

    def __iter__(self):
        return iter(self.tools)

    def __len__(self):
        return len(self.tools)

    def __contains__(self, name: str):
        return name in self.tool_map

    def to_params(self) -> List[Dict[str, Any]]:
        return [tool.to_descriptor() for tool in self.tools]

    def get_tool(self, name: str) -> Optional[BaseTool]:
        return self.tool_map.get(name)

    def add_tool(self, tool: BaseTool):
        """Add a single tool to the collection.

        If a tool with the same name already exists, it will be skipped and a warning will be logged.
        """
        if tool.name in self.tool_map:
            logger.warning(f"Tool {tool.name} already exists in collection, skipping")
            return self

        self.tools += (tool,)
        self.tool_map[tool.name] = tool
        return self

    def add_tools(self, *tools: BaseTool):
        """Add multiple tools to the collection.

        If any tool has a name conflict with an existing tool, it will be skipped and a warning will be logged.
        """
        for tool in tools:
            self.add_tool(tool)
        return self

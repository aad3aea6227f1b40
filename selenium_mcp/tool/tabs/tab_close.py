from selenium_mcp.tool.base import (
    BaseTool,
    ToolResult,
    build_schema,
    number_param,
    optional_index,
    success_response,
)
from selenium_mcp.utils.logger import logger


class BrowserTabClose(BaseTool):
    name: str = "browser_tab_close"
    title: str = "Close a tab"
    description: str = "Close a tab"
    read_only: bool = False
    parameters: dict = build_schema(
        number_param(
            "index",
            "The index of the tab to close. Closes current tab if not provided.",
        ),
    )

    def validate(self, params):
        optional_index(params, "index")

    def execute_impl(self, params, browser) -> ToolResult:
        index = optional_index(params, "index")
        logger.info(f"Closing tab at index: {'current' if index is None else index}")
        closed = browser.close_tab(index)
        return success_response(f"Closed tab at index {closed}")

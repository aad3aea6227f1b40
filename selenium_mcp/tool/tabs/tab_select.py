from selenium_mcp.tool.base import (
    BaseTool,
    ToolResult,
    build_schema,
    number_param,
    require_index,
    success_response,
)
from selenium_mcp.utils.logger import logger


class BrowserTabSelect(BaseTool):
    name: str = "browser_tab_select"
    title: str = "Select a tab"
    description: str = "Select a tab by index"
    read_only: bool = True
    parameters: dict = build_schema(
        number_param("index", "The index of the tab to select", required=True),
    )

    def validate(self, params):
        require_index(params, "index")

    def execute_impl(self, params, browser) -> ToolResult:
        index = require_index(params, "index")
        logger.info(f"Selecting tab at index: {index}")
        browser.switch_to_tab(index)
        url = browser.get_driver().current_url
        return success_response(f"Selected tab at index {index} with URL: {url}")

from selenium_mcp.tool.base import BaseTool, ToolResult, success_response
from selenium_mcp.utils.logger import logger


class BrowserClose(BaseTool):
    name: str = "browser_close"
    title: str = "Close browser"
    description: str = "Close the browser"
    read_only: bool = True

    def execute_impl(self, params, browser) -> ToolResult:
        logger.info("Closing browser")
        browser.close()
        return success_response("Browser closed")

from selenium_mcp.browser.waits import wait_for_document_ready
from selenium_mcp.tool.base import BaseTool, ToolResult, success_response
from selenium_mcp.utils.logger import logger


class BrowserNavigateBack(BaseTool):
    name: str = "browser_navigate_back"
    title: str = "Go back"
    description: str = "Go back to the previous page"
    read_only: bool = True

    def execute_impl(self, params, browser) -> ToolResult:
        driver = browser.get_driver()
        logger.info("Navigating back")
        driver.back()
        wait_for_document_ready(driver, browser.settings.settle_timeout)
        return success_response(f"Navigated back to {driver.current_url}")

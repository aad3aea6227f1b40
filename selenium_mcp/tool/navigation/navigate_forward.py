from selenium_mcp.browser.waits import wait_for_document_ready
from selenium_mcp.tool.base import BaseTool, ToolResult, success_response
from selenium_mcp.utils.logger import logger


class BrowserNavigateForward(BaseTool):
    name: str = "browser_navigate_forward"
    title: str = "Go forward"
    description: str = "Go forward to the next page"
    read_only: bool = True

    def execute_impl(self, params, browser) -> ToolResult:
        driver = browser.get_driver()
        logger.info("Navigating forward")
        driver.forward()
        wait_for_document_ready(driver, browser.settings.settle_timeout)
        return success_response(f"Navigated forward to {driver.current_url}")

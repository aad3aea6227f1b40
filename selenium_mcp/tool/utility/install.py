from selenium_mcp.browser.drivers import install_driver, normalize_browser_name
from selenium_mcp.tool.base import BaseTool, ToolResult, success_response
from selenium_mcp.utils.logger import logger


class BrowserInstall(BaseTool):
    name: str = "browser_install"
    title: str = "Install the browser specified in the config"
    description: str = (
        "Install the browser specified in the config. Call this if you get an "
        "error about the browser not being installed."
    )
    read_only: bool = False

    def execute_impl(self, params, browser) -> ToolResult:
        browser_name = normalize_browser_name(browser.settings.name)
        logger.info(f"Installing driver for browser: {browser_name}")
        path = install_driver(browser_name)
        return success_response(f"Installed driver for {browser_name}", path=path)

from selenium_mcp.browser.waits import wait_for_document_ready
from selenium_mcp.tool.base import (
    BaseTool,
    ToolResult,
    build_schema,
    require_string,
    string_param,
    success_response,
)
from selenium_mcp.utils.logger import logger

URL_SCHEMES = ("http://", "https://", "file://", "about:")


def normalize_url(url: str) -> str:
    """Prepend ``https://`` to URLs without a recognised scheme."""
    url = url.strip()
    if url.startswith(URL_SCHEMES):
        return url
    return f"https://{url}"


class BrowserNavigate(BaseTool):
    name: str = "browser_navigate"
    title: str = "Navigate to a URL"
    description: str = "Navigate to a URL"
    read_only: bool = False
    parameters: dict = build_schema(
        string_param("url", "The URL to navigate to", required=True),
    )

    def validate(self, params):
        require_string(params, "url")

    def execute_impl(self, params, browser) -> ToolResult:
        driver = browser.get_driver()
        url = normalize_url(params["url"])
        logger.info(f"Navigating to URL: {url}")
        driver.get(url)
        wait_for_document_ready(driver, browser.settings.settle_timeout)
        return success_response(f"Navigated to {driver.current_url}")

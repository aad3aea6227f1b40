from selenium_mcp.tool.base import (
    BaseTool,
    ToolResult,
    build_schema,
    optional_string,
    string_param,
    success_response,
)
from selenium_mcp.utils.logger import logger


class BrowserTabNew(BaseTool):
    name: str = "browser_tab_new"
    title: str = "Open a new tab"
    description: str = "Open a new tab"
    read_only: bool = True
    parameters: dict = build_schema(
        string_param(
            "url",
            "The URL to navigate to in the new tab. If not provided, the new tab will be blank.",
        ),
    )

    def validate(self, params):
        optional_string(params, "url")

    def execute_impl(self, params, browser) -> ToolResult:
        url = params.get("url") or None
        logger.info(f"Opening new tab with URL: {url or 'about:blank'}")

        if not browser.open_new_tab(url):
            return success_response(
                "Could not open a new tab, the current tab is still active",
                opened=False,
            )

        suffix = f" with URL: {url}" if url else ""
        return success_response(
            f"Opened new tab{suffix}",
            opened=True,
            index=browser.get_current_tab_index(),
        )

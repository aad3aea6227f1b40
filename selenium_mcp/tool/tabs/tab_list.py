from selenium_mcp.tool.base import BaseTool, ToolResult


class BrowserTabList(BaseTool):
    name: str = "browser_tab_list"
    title: str = "List tabs"
    description: str = "List browser tabs"
    read_only: bool = True

    def execute_impl(self, params, browser) -> ToolResult:
        tabs = browser.describe_tabs()
        return ToolResult(message=f"Found {len(tabs)} tabs", tabs=tabs)

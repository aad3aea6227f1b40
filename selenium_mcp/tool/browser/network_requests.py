from selenium_mcp.codec import json_codec
from selenium_mcp.tool.base import BaseTool, ToolResult

_ENTRIES_SCRIPT = """
const performance = window.performance || {};
const entries = performance.getEntries ? performance.getEntries() : [];
return JSON.stringify(entries);
"""


class BrowserNetworkRequests(BaseTool):
    name: str = "browser_network_requests"
    title: str = "List network requests"
    description: str = "Returns all network requests since loading the page"
    read_only: bool = True

    def execute_impl(self, params, browser) -> ToolResult:
        driver = browser.get_driver()
        entries = json_codec.decode(driver.execute_script(_ENTRIES_SCRIPT) or "[]")

        requests = []
        for entry in entries:
            if entry.get("entryType") != "resource":
                continue
            request = {"url": entry.get("name"), "type": entry.get("initiatorType")}
            if "startTime" in entry and "responseEnd" in entry:
                request["duration"] = entry["responseEnd"] - entry["startTime"]
            if "transferSize" in entry:
                request["size"] = entry["transferSize"]
            requests.append(request)

        return ToolResult(
            message=f"Retrieved {len(requests)} network requests", requests=requests
        )

from selenium.common.exceptions import WebDriverException

from selenium_mcp.tool.base import BaseTool, ToolResult
from selenium_mcp.utils.logger import logger

# Installed on first use when the driver does not expose a browser log
_CAPTURE_SCRIPT = """
if (!window._seleniumConsoleLogs) {
    window._seleniumConsoleLogs = [];
    const levels = {log: 'log', info: 'info', warn: 'warning', error: 'error'};
    for (const method of Object.keys(levels)) {
        const original = console[method];
        console[method] = function() {
            window._seleniumConsoleLogs.push({
                level: levels[method],
                message: Array.from(arguments).join(' '),
                timestamp: Date.now()
            });
            original.apply(console, arguments);
        };
    }
}
return window._seleniumConsoleLogs;
"""

_LEVELS = {"SEVERE": "error", "WARNING": "warning", "INFO": "info"}


class BrowserConsoleMessages(BaseTool):
    name: str = "browser_console_messages"
    title: str = "Get console messages"
    description: str = "Returns all console messages"
    read_only: bool = True

    def execute_impl(self, params, browser) -> ToolResult:
        driver = browser.get_driver()
        try:
            entries = driver.get_log("browser")
        except (WebDriverException, AttributeError) as e:
            logger.warning(f"Could not get browser logs: {e}")
            messages = driver.execute_script(_CAPTURE_SCRIPT) or []
            return ToolResult(
                message=f"Retrieved {len(messages)} console messages using JavaScript",
                messages=messages,
            )

        messages = [
            {
                "level": _LEVELS.get(entry.get("level"), "log"),
                "message": entry.get("message"),
                "timestamp": entry.get("timestamp"),
            }
            for entry in entries
        ]
        return ToolResult(
            message=f"Retrieved {len(messages)} console messages", messages=messages
        )

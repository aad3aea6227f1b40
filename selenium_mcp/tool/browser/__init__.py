from selenium_mcp.tool.browser.close import BrowserClose
from selenium_mcp.tool.browser.console_messages import BrowserConsoleMessages
from selenium_mcp.tool.browser.frame_switch import BrowserFrameSwitch
from selenium_mcp.tool.browser.network_requests import BrowserNetworkRequests
from selenium_mcp.tool.browser.resize import BrowserResize
from selenium_mcp.tool.browser.screenshot import BrowserTakeScreenshot
from selenium_mcp.tool.browser.snapshot import BrowserSnapshot


__all__ = [
    "BrowserClose",
    "BrowserConsoleMessages",
    "BrowserFrameSwitch",
    "BrowserNetworkRequests",
    "BrowserResize",
    "BrowserSnapshot",
    "BrowserTakeScreenshot",
]

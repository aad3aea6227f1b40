from selenium_mcp.tool.tabs.tab_close import BrowserTabClose
from selenium_mcp.tool.tabs.tab_list import BrowserTabList
from selenium_mcp.tool.tabs.tab_new import BrowserTabNew
from selenium_mcp.tool.tabs.tab_select import BrowserTabSelect


__all__ = [
    "BrowserTabClose",
    "BrowserTabList",
    "BrowserTabNew",
    "BrowserTabSelect",
]

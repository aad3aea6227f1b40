from selenium_mcp.browser.element_finder import find_element, find_elements
from selenium_mcp.browser.manager import BrowserManager


__all__ = [
    "BrowserManager",
    "find_element",
    "find_elements",
]

from selenium_mcp.tool.navigation.navigate import BrowserNavigate
from selenium_mcp.tool.navigation.navigate_back import BrowserNavigateBack
from selenium_mcp.tool.navigation.navigate_forward import BrowserNavigateForward


__all__ = [
    "BrowserNavigate",
    "BrowserNavigateBack",
    "BrowserNavigateForward",
]

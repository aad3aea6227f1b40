from selenium_mcp.tool.interaction.click import BrowserClick
from selenium_mcp.tool.interaction.drag import BrowserDrag
from selenium_mcp.tool.interaction.handle_dialog import BrowserHandleDialog
from selenium_mcp.tool.interaction.hover import BrowserHover
from selenium_mcp.tool.interaction.press_key import BrowserPressKey
from selenium_mcp.tool.interaction.select_option import BrowserSelectOption
from selenium_mcp.tool.interaction.type_text import BrowserType
from selenium_mcp.tool.interaction.wait_for import BrowserWaitFor


__all__ = [
    "BrowserClick",
    "BrowserDrag",
    "BrowserHandleDialog",
    "BrowserHover",
    "BrowserPressKey",
    "BrowserSelectOption",
    "BrowserType",
    "BrowserWaitFor",
]

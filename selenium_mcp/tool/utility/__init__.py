from selenium_mcp.tool.utility.install import BrowserInstall
from selenium_mcp.tool.utility.pdf_save import BrowserPdfSave


__all__ = ["BrowserInstall", "BrowserPdfSave"]

from selenium_mcp.tool.files.file_upload import BrowserFileUpload


__all__ = ["BrowserFileUpload"]

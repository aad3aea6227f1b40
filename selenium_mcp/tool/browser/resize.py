from selenium_mcp.exceptions import ToolError
from selenium_mcp.tool.base import (
    BaseTool,
    ToolResult,
    build_schema,
    number_param,
    require_number,
    success_response,
)
from selenium_mcp.utils.logger import logger


class BrowserResize(BaseTool):
    name: str = "browser_resize"
    title: str = "Resize browser window"
    description: str = "Resize the browser window"
    read_only: bool = True
    parameters: dict = build_schema(
        number_param("width", "Width of the browser window", required=True),
        number_param("height", "Height of the browser window", required=True),
    )

    def validate(self, params):
        width = require_number(params, "width")
        height = require_number(params, "height")
        if int(width) <= 0 or int(height) <= 0:
            raise ToolError("Width and height must be positive numbers")

    def execute_impl(self, params, browser) -> ToolResult:
        width = int(params["width"])
        height = int(params["height"])
        logger.info(f"Resizing browser window to {width}x{height}")
        browser.get_driver().set_window_size(width, height)
        return success_response(f"Resized browser window to {width}x{height}")

"""Viewport or element screenshot, saved to disk and returned inline."""

import base64
import io

from PIL import Image

from selenium_mcp.browser.element_finder import find_element, scroll_into_view
from selenium_mcp.exceptions import ToolError
from selenium_mcp.tool.base import (
    BaseTool,
    ToolResult,
    boolean_param,
    build_schema,
    optional_boolean,
    optional_string,
    string_param,
)
from selenium_mcp.utils.files_utils import resolve_output_file
from selenium_mcp.utils.logger import logger

_SCREENSHOT_DESCRIPTION = (
    "Take a screenshot of the current page. You can't perform actions based on "
    "the screenshot, use browser_snapshot for actions."
)

JPEG_QUALITY = 80


def png_to_jpeg(png_bytes: bytes) -> bytes:
    with Image.open(io.BytesIO(png_bytes)) as image:
        buffer = io.BytesIO()
        image.convert("RGB").save(buffer, format="JPEG", quality=JPEG_QUALITY)
        return buffer.getvalue()


class BrowserTakeScreenshot(BaseTool):
    name: str = "browser_take_screenshot"
    title: str = "Take a screenshot"
    description: str = _SCREENSHOT_DESCRIPTION
    read_only: bool = True
    parameters: dict = build_schema(
        boolean_param(
            "raw",
            "Whether to return without compression (in PNG format). Default is false, "
            "which returns a JPEG image.",
        ),
        string_param(
            "filename",
            "File name to save the screenshot to. Defaults to "
            "`page-{timestamp}.{png|jpeg}` if not specified.",
        ),
        string_param(
            "element",
            "Human-readable element description used to obtain permission to "
            "screenshot the element. If not provided, the screenshot will be taken "
            "of viewport. If element is provided, ref must be provided too.",
        ),
        string_param(
            "ref",
            "Exact target element reference from the page snapshot. If not provided, "
            "the screenshot will be taken of viewport. If ref is provided, element "
            "must be provided too.",
        ),
    )

    def validate(self, params):
        optional_boolean(params, "raw")
        optional_string(params, "filename")
        element = optional_string(params, "element")
        ref = optional_string(params, "ref")
        if (element is None) != (ref is None):
            raise ToolError(
                "Both element description and reference must be provided together"
            )

    def execute_impl(self, params, browser) -> ToolResult:
        driver = browser.get_driver()
        raw = optional_boolean(params, "raw")
        ref = params.get("ref")

        if ref is not None:
            element = find_element(driver, ref)
            scroll_into_view(driver, element)
            image_bytes = element.screenshot_as_png
        else:
            image_bytes = driver.get_screenshot_as_png()

        extension = "png" if raw else "jpeg"
        if not raw:
            image_bytes = png_to_jpeg(image_bytes)

        path = resolve_output_file(
            browser.config.output_dir,
            "screenshots",
            params.get("filename"),
            "page",
            extension,
        )
        path.write_bytes(image_bytes)
        logger.info(f"Screenshot saved to {path}")

        return ToolResult(
            message=f"Screenshot saved as {path.name}",
            path=str(path),
            content=[
                {
                    "type": "image",
                    "data": base64.b64encode(image_bytes).decode("ascii"),
                    "mimeType": f"image/{extension}",
                }
            ],
        )

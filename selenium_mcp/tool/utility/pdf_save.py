import base64

from selenium.common.exceptions import WebDriverException
from selenium.webdriver.common.print_page_options import PrintOptions

from selenium_mcp.exceptions import ToolError, UnsupportedBrowserError
from selenium_mcp.tool.base import (
    BaseTool,
    ToolResult,
    boolean_param,
    build_schema,
    number_param,
    optional_boolean,
    optional_number,
    optional_string,
    string_param,
)
from selenium_mcp.utils.files_utils import resolve_output_file
from selenium_mcp.utils.logger import logger

DEFAULT_PAGE_RANGES = "1-10"


class BrowserPdfSave(BaseTool):
    name: str = "browser_pdf_save"
    title: str = "Save as PDF"
    description: str = "Save page as PDF"
    read_only: bool = True
    parameters: dict = build_schema(
        string_param(
            "filename",
            "File name to save the pdf to. Defaults to `page-{timestamp}.pdf` if not specified.",
        ),
        boolean_param("landscape", "Whether to use landscape orientation"),
        boolean_param("printBackground", "Whether to print background graphics"),
        number_param("scale", "Scale of the page rendering, between 0.1 and 2"),
        string_param(
            "pageRanges",
            f"Page ranges to print, such as `1-5, 8`. Defaults to `{DEFAULT_PAGE_RANGES}`.",
        ),
    )

    def validate(self, params):
        optional_string(params, "filename")
        optional_boolean(params, "landscape")
        optional_boolean(params, "printBackground")
        optional_string(params, "pageRanges")
        scale = optional_number(params, "scale")
        if scale is not None and not 0.1 <= scale <= 2:
            raise ToolError("Scale must be between 0.1 and 2")

    def execute_impl(self, params, browser) -> ToolResult:
        driver = browser.get_driver()

        options = PrintOptions()
        options.orientation = (
            "landscape" if optional_boolean(params, "landscape") else "portrait"
        )
        options.background = optional_boolean(params, "printBackground")
        if params.get("scale") is not None:
            options.scale = params["scale"]
        ranges = params.get("pageRanges") or DEFAULT_PAGE_RANGES
        options.page_ranges = [r.strip() for r in ranges.split(",") if r.strip()]

        try:
            content = driver.print_page(options)
        except WebDriverException as e:
            raise UnsupportedBrowserError(
                "PDF printing is not supported by this browser. Use headless Chrome "
                "or Firefox to save pages as PDF."
            ) from e

        path = resolve_output_file(
            browser.config.output_dir, "pdfs", params.get("filename"), "page", "pdf"
        )
        path.write_bytes(base64.b64decode(content))
        logger.info(f"PDF saved to {path}")
        return ToolResult(message=f"PDF saved as {path.name}", path=str(path))

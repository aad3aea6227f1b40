from pathlib import Path

from selenium.common.exceptions import WebDriverException
from selenium.webdriver.common.by import By

from selenium_mcp.browser.element_finder import is_usable
from selenium_mcp.exceptions import ToolError
from selenium_mcp.tool.base import (
    BaseTool,
    ToolResult,
    array_param,
    build_schema,
    require_string_list,
    success_response,
)
from selenium_mcp.utils.logger import logger

FILE_INPUT_SELECTORS = ("input[type='file']", "input[accept]")

_REVEAL_SCRIPT = """
const s = arguments[0].style;
s.position = 'fixed'; s.top = '0'; s.left = '0';
s.opacity = '1'; s.display = 'block'; s.visibility = 'visible';
s.width = '100px'; s.height = '100px'; s.zIndex = '9999';
"""


def find_file_input(driver):
    for selector in FILE_INPUT_SELECTORS:
        try:
            inputs = driver.find_elements(By.CSS_SELECTOR, selector)
        except WebDriverException as e:
            logger.warning(f"Error finding file input by {selector}: {e.msg}")
            continue
        if inputs:
            return inputs[0]
    return None


class BrowserFileUpload(BaseTool):
    name: str = "browser_file_upload"
    title: str = "Upload files"
    description: str = "Upload one or multiple files"
    read_only: bool = False
    parameters: dict = build_schema(
        array_param(
            "paths",
            "The absolute paths to the files to upload. Can be a single file or multiple files.",
            item_type="string",
            required=True,
        ),
    )

    def validate(self, params):
        for path in require_string_list(params, "paths"):
            file_path = Path(path)
            if not file_path.exists():
                raise ToolError(f"File does not exist: {path}")
            if not file_path.is_file():
                raise ToolError(f"Path is not a file: {path}")

    def execute_impl(self, params, browser) -> ToolResult:
        driver = browser.get_driver()
        paths = [str(Path(p).resolve()) for p in params["paths"]]
        logger.info(f"Uploading files: {paths}")

        file_input = find_file_input(driver)
        if file_input is None:
            raise ToolError("Could not find a file input element on the page")

        if not is_usable(file_input):
            # hidden inputs reject send_keys on some drivers
            driver.execute_script(_REVEAL_SCRIPT, file_input)

        file_input.send_keys("\n".join(paths))
        return success_response(f"Uploaded {len(paths)} file(s)")

import time

from selenium_mcp.browser.waits import wait_for_text, wait_for_text_gone
from selenium_mcp.exceptions import ToolError
from selenium_mcp.tool.base import (
    BaseTool,
    ToolResult,
    build_schema,
    number_param,
    optional_number,
    optional_string,
    string_param,
    success_response,
)
from selenium_mcp.utils.logger import logger

DEFAULT_TEXT_TIMEOUT = 10.0


class BrowserWaitFor(BaseTool):
    name: str = "browser_wait_for"
    title: str = "Wait for"
    description: str = "Wait for text to appear or disappear or a specified time to pass"
    read_only: bool = True
    parameters: dict = build_schema(
        number_param("time", "The time to wait in seconds"),
        string_param("text", "The text to wait for"),
        string_param("textGone", "The text to wait for to disappear"),
    )

    def validate(self, params):
        wait_time = optional_number(params, "time")
        text = optional_string(params, "text")
        text_gone = optional_string(params, "textGone")
        if wait_time is None and text is None and text_gone is None:
            raise ToolError(
                "At least one of 'time', 'text', or 'textGone' parameters must be provided"
            )
        if wait_time is not None and wait_time <= 0:
            raise ToolError("Time parameter must be a positive number")

    def execute_impl(self, params, browser) -> ToolResult:
        """Text waits are bounded by ``time`` (10 seconds when omitted).

        A text wait that times out is reported as a result, not an error.
        """
        wait_time = params.get("time")
        text = params.get("text")
        text_gone = params.get("textGone")
        timeout = wait_time if wait_time is not None else DEFAULT_TEXT_TIMEOUT

        if text is not None:
            driver = browser.get_driver()
            logger.info(f"Waiting for text to appear: {text}")
            if wait_for_text(driver, text, timeout):
                return success_response(f"Text appeared: {text}")
            return success_response(f"Timeout waiting for text to appear: {text}")

        if text_gone is not None:
            driver = browser.get_driver()
            logger.info(f"Waiting for text to disappear: {text_gone}")
            if wait_for_text_gone(driver, text_gone, timeout):
                return success_response(f"Text disappeared: {text_gone}")
            return success_response(
                f"Timeout waiting for text to disappear: {text_gone}"
            )

        logger.info(f"Waiting for {wait_time} seconds")
        time.sleep(wait_time)
        return success_response(f"Waited for {wait_time} seconds")

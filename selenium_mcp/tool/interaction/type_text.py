from selenium.common.exceptions import WebDriverException
from selenium.webdriver.common.keys import Keys
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from selenium_mcp.browser.element_finder import find_element
from selenium_mcp.exceptions import ToolError
from selenium_mcp.tool.base import (
    BaseTool,
    ToolResult,
    boolean_param,
    build_schema,
    optional_boolean,
    require_element,
    string_param,
    success_response,
)
from selenium_mcp.utils.logger import logger

JS_SET_VALUE = "arguments[0].value = arguments[1];"
JS_CLEAR_VALUE = "arguments[0].value = '';"
JS_SUBMIT_FORM = "if (arguments[0].form) { arguments[0].form.submit(); }"


class BrowserType(BaseTool):
    name: str = "browser_type"
    title: str = "Type text"
    description: str = "Type text into an element using enhanced element detection"
    read_only: bool = False
    parameters: dict = build_schema(
        string_param("element", "Human-readable element description", required=True),
        string_param(
            "ref", "Exact target element reference from the page snapshot", required=True
        ),
        string_param("text", "Text to type into the element", required=True),
        boolean_param("clear", "Whether to clear the element before typing"),
        boolean_param("submit", "Whether to submit the form after typing"),
        boolean_param("force", "Whether to force type even if element is not interactable"),
    )

    def validate(self, params):
        require_element(params)
        if not isinstance(params.get("text"), str):
            raise ToolError("Parameter 'text' is required and must be a string")
        for flag in ("clear", "submit", "force"):
            optional_boolean(params, flag)

    def execute_impl(self, params, browser) -> ToolResult:
        driver = browser.get_driver()
        description = params["element"]
        text = params["text"]
        clear = optional_boolean(params, "clear")
        submit = optional_boolean(params, "submit")
        force = optional_boolean(params, "force")

        logger.debug(f"Finding element to type into: {params['ref']}")
        element = find_element(driver, params["ref"])

        if not force:
            WebDriverWait(driver, browser.settings.settle_timeout).until(
                EC.element_to_be_clickable(element)
            )

        try:
            if clear:
                if force:
                    driver.execute_script(JS_CLEAR_VALUE, element)
                else:
                    element.clear()
            if force:
                driver.execute_script(JS_SET_VALUE, element, text)
            else:
                element.send_keys(text)
            if submit:
                element.send_keys(Keys.RETURN)
            return success_response(f"Typed text into element: {description}")
        except WebDriverException as e:
            logger.error(f"Failed to type into element: {e.msg}")
            if not force:
                raise
            script = JS_SET_VALUE + (JS_SUBMIT_FORM if submit else "")
            try:
                driver.execute_script(script, element, text)
            except WebDriverException as js_error:
                raise ToolError(
                    f"Failed to type into element even with force option: {js_error.msg}"
                ) from js_error
            return success_response(
                f"Force typed text into element using JavaScript: {description}"
            )

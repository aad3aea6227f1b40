from selenium.common.exceptions import WebDriverException
from selenium.webdriver.common.action_chains import ActionChains
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

JS_CLICK = "arguments[0].click();"


class BrowserClick(BaseTool):
    name: str = "browser_click"
    title: str = "Click"
    description: str = "Click on an element using enhanced element detection"
    read_only: bool = False
    parameters: dict = build_schema(
        string_param("element", "Human-readable element description", required=True),
        string_param(
            "ref", "Exact target element reference from the page snapshot", required=True
        ),
        boolean_param("force", "Whether to force click even if element is not clickable"),
        boolean_param("double", "Whether to perform a double click"),
        boolean_param("right", "Whether to perform a right click"),
    )

    def validate(self, params):
        require_element(params)
        for flag in ("force", "double", "right"):
            optional_boolean(params, flag)

    def execute_impl(self, params, browser) -> ToolResult:
        driver = browser.get_driver()
        description = params["element"]
        force = optional_boolean(params, "force")

        logger.debug(f"Finding element to click: {params['ref']}")
        element = find_element(driver, params["ref"])

        if not force:
            WebDriverWait(driver, browser.settings.settle_timeout).until(
                EC.element_to_be_clickable(element)
            )

        try:
            if optional_boolean(params, "double"):
                ActionChains(driver).double_click(element).perform()
                return success_response(f"Double clicked element: {description}")
            if optional_boolean(params, "right"):
                ActionChains(driver).context_click(element).perform()
                return success_response(f"Right clicked element: {description}")
            if force:
                driver.execute_script(JS_CLICK, element)
            else:
                element.click()
            return success_response(f"Clicked element: {description}")
        except WebDriverException as e:
            logger.error(f"Failed to click element: {e.msg}")
            if not force:
                raise
            try:
                driver.execute_script(JS_CLICK, element)
            except WebDriverException as js_error:
                raise ToolError(
                    f"Failed to click element even with force option: {js_error.msg}"
                ) from js_error
            return success_response(
                f"Force clicked element using JavaScript: {description}"
            )

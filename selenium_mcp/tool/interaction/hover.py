from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from selenium_mcp.browser.element_finder import find_element, scroll_into_view
from selenium_mcp.tool.base import (
    BaseTool,
    ToolResult,
    build_schema,
    require_element,
    string_param,
    success_response,
)
from selenium_mcp.utils.logger import logger


class BrowserHover(BaseTool):
    name: str = "browser_hover"
    title: str = "Hover mouse"
    description: str = "Hover over element on page"
    read_only: bool = True
    parameters: dict = build_schema(
        string_param(
            "element",
            "Human-readable element description used to obtain permission to interact with the element",
            required=True,
        ),
        string_param(
            "ref", "Exact target element reference from the page snapshot", required=True
        ),
    )

    def validate(self, params):
        require_element(params)

    def execute_impl(self, params, browser) -> ToolResult:
        driver = browser.get_driver()
        description, ref = params["element"], params["ref"]
        logger.info(f"Hovering over element: {description} (ref: {ref})")

        element = find_element(driver, ref)
        scroll_into_view(driver, element)
        WebDriverWait(driver, browser.settings.settle_timeout).until(
            EC.visibility_of(element)
        )
        ActionChains(driver).move_to_element(element).perform()
        return success_response(f"Hovered over element: {description}")

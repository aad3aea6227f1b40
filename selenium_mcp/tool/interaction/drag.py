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


class BrowserDrag(BaseTool):
    name: str = "browser_drag"
    title: str = "Drag mouse"
    description: str = "Perform drag and drop between two elements"
    read_only: bool = False
    parameters: dict = build_schema(
        string_param(
            "startElement",
            "Human-readable source element description used to obtain the permission to interact with the element",
            required=True,
        ),
        string_param(
            "startRef", "Exact source element reference from the page snapshot", required=True
        ),
        string_param(
            "endElement",
            "Human-readable target element description used to obtain the permission to interact with the element",
            required=True,
        ),
        string_param(
            "endRef", "Exact target element reference from the page snapshot", required=True
        ),
    )

    def validate(self, params):
        require_element(params, "startElement", "startRef")
        require_element(params, "endElement", "endRef")

    def execute_impl(self, params, browser) -> ToolResult:
        driver = browser.get_driver()
        start, end = params["startElement"], params["endElement"]
        logger.info(
            f"Dragging from element: {start} (ref: {params['startRef']}) "
            f"to element: {end} (ref: {params['endRef']})"
        )

        source = find_element(driver, params["startRef"])
        target = find_element(driver, params["endRef"])

        scroll_into_view(driver, source)
        WebDriverWait(driver, browser.settings.settle_timeout).until(
            EC.element_to_be_clickable(source)
        )
        ActionChains(driver).drag_and_drop(source, target).perform()
        return success_response(f"Dragged from element: {start} to element: {end}")

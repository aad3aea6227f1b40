from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import Select, WebDriverWait

from selenium_mcp.browser.element_finder import find_element, scroll_into_view
from selenium_mcp.tool.base import (
    BaseTool,
    ToolResult,
    array_param,
    build_schema,
    require_element,
    require_string_list,
    string_param,
    success_response,
)
from selenium_mcp.utils.logger import logger


def _select_one(select: Select, value: str) -> bool:
    """Try the value attribute, then visible text, then a numeric index."""
    try:
        select.select_by_value(value)
        return True
    except NoSuchElementException:
        pass
    try:
        select.select_by_visible_text(value)
        return True
    except NoSuchElementException:
        pass
    try:
        select.select_by_index(int(value))
        return True
    except (ValueError, NoSuchElementException):
        return False


class BrowserSelectOption(BaseTool):
    name: str = "browser_select_option"
    title: str = "Select option"
    description: str = "Select an option in a dropdown"
    read_only: bool = False
    parameters: dict = build_schema(
        string_param(
            "element",
            "Human-readable element description used to obtain permission to interact with the element",
            required=True,
        ),
        string_param(
            "ref", "Exact target element reference from the page snapshot", required=True
        ),
        array_param(
            "values",
            "Array of values to select in the dropdown. This can be a single value or multiple values.",
            item_type="string",
            required=True,
        ),
    )

    def validate(self, params):
        require_element(params)
        require_string_list(params, "values")

    def execute_impl(self, params, browser) -> ToolResult:
        driver = browser.get_driver()
        description, ref, values = params["element"], params["ref"], params["values"]
        logger.info(
            f"Selecting options in element: {description} (ref: {ref}), values: {values}"
        )

        element = find_element(driver, ref)
        scroll_into_view(driver, element)
        WebDriverWait(driver, browser.settings.settle_timeout).until(
            EC.element_to_be_clickable(element)
        )

        select = Select(element)
        if select.is_multiple:
            select.deselect_all()
        elif len(values) > 1:
            logger.warning(
                "Multiple values provided for a single-select dropdown. Only the first value will be used."
            )
            values = values[:1]

        selected = [value for value in values if _select_one(select, value)]
        for value in values:
            if value not in selected:
                logger.warning(f"Could not select option with value/text/index: {value}")

        return success_response(
            f"Selected options in element: {description}", selected=selected
        )

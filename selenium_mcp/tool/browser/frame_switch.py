from selenium_mcp.browser.element_finder import find_element
from selenium_mcp.exceptions import ToolError
from selenium_mcp.tool.base import (
    BaseTool,
    ToolResult,
    boolean_param,
    build_schema,
    integer_param,
    optional_boolean,
    optional_index,
    optional_string,
    string_param,
    success_response,
)


class BrowserFrameSwitch(BaseTool):
    name: str = "browser_frame_switch"
    title: str = "Switch frame"
    description: str = "Switch to a frame or iframe, or back to the main content"
    read_only: bool = True
    parameters: dict = build_schema(
        string_param(
            "element",
            "Human-readable element description used to obtain permission to switch to the frame",
        ),
        string_param("ref", "Exact target frame element reference from the page snapshot"),
        string_param("name", "Name or ID of the frame to switch to"),
        integer_param("index", "Index of the frame to switch to (0-based)"),
        boolean_param("parent", "Whether to switch to the parent frame"),
        boolean_param("default", "Whether to switch back to the main content"),
    )

    def validate(self, params):
        element = optional_string(params, "element")
        ref = optional_string(params, "ref")
        if (element is None) != (ref is None):
            raise ToolError(
                "Both element description and reference must be provided together"
            )
        optional_string(params, "name")
        optional_index(params, "index")
        optional_boolean(params, "parent")
        optional_boolean(params, "default")

        methods = [
            ref is not None,
            params.get("name") is not None,
            params.get("index") is not None,
            bool(params.get("parent")),
            bool(params.get("default")),
        ]
        if sum(methods) > 1:
            raise ToolError("Only one frame selection method can be specified")
        if sum(methods) == 0:
            raise ToolError("No frame selection method specified")

    def execute_impl(self, params, browser) -> ToolResult:
        driver = browser.get_driver()

        if params.get("default"):
            driver.switch_to.default_content()
            return success_response("Switched to main content")
        if params.get("parent"):
            driver.switch_to.parent_frame()
            return success_response("Switched to parent frame")
        if params.get("ref") is not None:
            frame = find_element(driver, params["ref"])
            driver.switch_to.frame(frame)
            return success_response(f"Switched to frame element: {params['element']}")
        if params.get("name") is not None:
            driver.switch_to.frame(params["name"])
            return success_response(f"Switched to frame: {params['name']}")
        if params.get("index") is not None:
            index = optional_index(params, "index")
            driver.switch_to.frame(index)
            return success_response(f"Switched to frame at index: {index}")
        raise ToolError("No frame selection method specified")

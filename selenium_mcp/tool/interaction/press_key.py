from selenium.webdriver.common.action_chains import ActionChains

from selenium_mcp.browser.keys import key_for
from selenium_mcp.tool.base import (
    BaseTool,
    ToolResult,
    build_schema,
    require_string,
    string_param,
    success_response,
)
from selenium_mcp.utils.logger import logger


class BrowserPressKey(BaseTool):
    name: str = "browser_press_key"
    title: str = "Press a key"
    description: str = "Press a key on the keyboard"
    read_only: bool = False
    parameters: dict = build_schema(
        string_param(
            "key",
            "Name of the key to press or a character to generate, such as `ArrowLeft` or `a`",
            required=True,
        ),
    )

    def validate(self, params):
        require_string(params, "key")

    def execute_impl(self, params, browser) -> ToolResult:
        driver = browser.get_driver()
        key_name = params["key"]
        logger.info(f"Pressing key: {key_name}")

        # unknown names are typed as literal characters
        ActionChains(driver).send_keys(key_for(key_name) or key_name).perform()
        return success_response(f"Pressed key: {key_name}")

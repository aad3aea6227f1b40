from selenium_mcp.browser.waits import wait_for_alert
from selenium_mcp.exceptions import ToolError
from selenium_mcp.tool.base import (
    BaseTool,
    ToolResult,
    boolean_param,
    build_schema,
    optional_string,
    require_boolean,
    string_param,
    success_response,
)
from selenium_mcp.utils.logger import logger

DIALOG_TIMEOUT = 5.0


class BrowserHandleDialog(BaseTool):
    name: str = "browser_handle_dialog"
    title: str = "Handle a dialog"
    description: str = "Handle a dialog"
    read_only: bool = False
    parameters: dict = build_schema(
        boolean_param("accept", "Whether to accept the dialog.", required=True),
        string_param("promptText", "The text of the prompt in case of a prompt dialog."),
    )

    def validate(self, params):
        require_boolean(params, "accept")
        optional_string(params, "promptText")

    def execute_impl(self, params, browser) -> ToolResult:
        driver = browser.get_driver()
        accept = params["accept"]
        prompt_text = params.get("promptText")
        logger.info(f"Handling dialog: accept={accept}, promptText={prompt_text}")

        alert = wait_for_alert(driver, DIALOG_TIMEOUT)
        if alert is None:
            raise ToolError("No dialog is present")

        dialog_text = alert.text
        if prompt_text is not None:
            alert.send_keys(prompt_text)
        if accept:
            alert.accept()
        else:
            alert.dismiss()

        outcome = "accepted" if accept else "dismissed"
        return success_response(f"Handled dialog: {outcome}, text: {dialog_text}")

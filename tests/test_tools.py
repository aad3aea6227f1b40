import base64
import io
import json

import pytest
from PIL import Image
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.common.by import By

from selenium_mcp.exceptions import ToolError, UnsupportedBrowserError
from selenium_mcp.tool.browser import (
    BrowserClose,
    BrowserConsoleMessages,
    BrowserFrameSwitch,
    BrowserNetworkRequests,
    BrowserSnapshot,
    BrowserTakeScreenshot,
)
from selenium_mcp.tool.files import BrowserFileUpload
from selenium_mcp.tool.interaction import (
    BrowserClick,
    BrowserDrag,
    BrowserHandleDialog,
    BrowserPressKey,
    BrowserSelectOption,
    BrowserType,
    BrowserWaitFor,
)
from selenium_mcp.tool.interaction import handle_dialog
from selenium_mcp.tool.navigation import BrowserNavigateBack
from selenium_mcp.tool.navigation.navigate import normalize_url
from selenium_mcp.tool.tabs import BrowserTabClose, BrowserTabNew
from selenium_mcp.tool.utility import BrowserPdfSave

from conftest import DriverFactory, FakeElement


def png_bytes(size=(4, 3), color=(200, 30, 30)):
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


class FakeAlert:
    def __init__(self, text):
        self.text = text
        self.typed = None
        self.outcome = None

    def send_keys(self, value):
        self.typed = value

    def accept(self):
        self.outcome = "accepted"

    def dismiss(self):
        self.outcome = "dismissed"


@pytest.mark.parametrize(
    "tool, params, message",
    [
        (BrowserClick(), {"ref": "x"}, "'element'"),
        (BrowserClick(), {"element": "Login", "ref": "x", "force": "yes"}, "'force'"),
        (BrowserType(), {"element": "Name", "ref": "name"}, "'text'"),
        (BrowserSelectOption(), {"element": "Menu", "ref": "menu", "values": []}, "'values'"),
        (
            BrowserDrag(),
            {"startElement": "Card", "startRef": "card", "endElement": "Column"},
            "'endRef'",
        ),
        (BrowserPressKey(), {"key": ""}, "'key'"),
        (BrowserWaitFor(), {}, "At least one of"),
        (BrowserWaitFor(), {"time": -1}, "positive number"),
        (BrowserHandleDialog(), {"accept": "true"}, "'accept'"),
        (BrowserTakeScreenshot(), {"element": "Logo"}, "provided together"),
        (BrowserFrameSwitch(), {}, "No frame selection method"),
        (BrowserFrameSwitch(), {"name": "main", "index": 0}, "Only one frame selection"),
        (BrowserPdfSave(), {"scale": 3}, "between 0.1 and 2"),
        (BrowserTabClose(), {"index": -1}, "non-negative integer"),
        (BrowserTabNew(), {"url": 5}, "'url'"),
        (BrowserFileUpload(), {"paths": "a.txt"}, "'paths'"),
    ],
)
def test_invalid_parameters_fail_before_touching_browser(
    tool, params, message, browser, driver_factory
):
    with pytest.raises(ToolError) as exc_info:
        tool.execute(params, browser)

    assert message in exc_info.value.message
    assert driver_factory.calls == 0


def test_normalize_url():
    assert normalize_url("example.com") == "https://example.com"
    assert normalize_url(" http://example.com ") == "http://example.com"
    assert normalize_url("file:///tmp/page.html") == "file:///tmp/page.html"
    assert normalize_url("about:blank") == "about:blank"


def test_navigate_back(browser, driver):
    driver.get("https://example.com/previous")
    result = BrowserNavigateBack().execute({}, browser)
    assert result.message == "Navigated back to https://example.com/previous"


def test_close_tool_ends_session(browser, driver):
    result = BrowserClose().execute({}, browser)

    assert result.message == "Browser closed"
    assert driver.quit_count == 1
    assert not browser.is_open


def test_snapshot_reports_page_and_tree(browser, driver):
    driver.titles[driver.current] = "Example"
    driver.get("https://example.com")
    tree = {"type": "root", "ref": "root", "children": []}
    driver.script_results["getElementsByTagName"] = tree

    result = BrowserSnapshot().execute({}, browser).to_dict()

    assert result == {"url": "https://example.com", "title": "Example", "snapshot": tree}


def test_screenshot_defaults_to_jpeg(browser, driver, tmp_path):
    driver.screenshot = png_bytes()

    result = BrowserTakeScreenshot().execute({}, browser).to_dict()

    content = result["content"][0]
    assert content["type"] == "image"
    assert content["mimeType"] == "image/jpeg"
    data = base64.b64decode(content["data"])
    assert data[:2] == b"\xff\xd8"
    saved = tmp_path / "screenshots"
    files = list(saved.iterdir())
    assert len(files) == 1
    assert files[0].suffix == ".jpeg"
    assert files[0].read_bytes() == data
    assert result["path"] == str(files[0])


def test_raw_screenshot_keeps_png_and_filename(browser, driver, tmp_path):
    driver.screenshot = png_bytes()

    result = BrowserTakeScreenshot().execute(
        {"raw": True, "filename": "../escape/home"}, browser
    ).to_dict()

    path = tmp_path / "screenshots" / "home.png"
    assert result["path"] == str(path)
    assert path.read_bytes() == driver.screenshot
    assert result["content"][0]["mimeType"] == "image/png"


def test_pdf_save(browser, driver, tmp_path):
    driver.pdf = base64.b64encode(b"%PDF-1.4 test").decode("ascii")

    result = BrowserPdfSave().execute(
        {"filename": "report", "landscape": True, "pageRanges": "1-2, 5"}, browser
    )

    path = tmp_path / "pdfs" / "report.pdf"
    assert result.path == str(path)
    assert path.read_bytes() == b"%PDF-1.4 test"
    assert driver.print_options.orientation == "landscape"
    assert driver.print_options.page_ranges == ["1-2", "5"]


def test_pdf_save_unsupported_driver(browser, driver):
    with pytest.raises(UnsupportedBrowserError) as exc_info:
        BrowserPdfSave().execute({}, browser)

    assert "not supported" in exc_info.value.message


def test_network_requests_keep_resource_entries(browser, driver):
    entries = [
        {"entryType": "navigation", "name": "https://example.com"},
        {
            "entryType": "resource",
            "name": "https://example.com/app.js",
            "initiatorType": "script",
            "startTime": 10,
            "responseEnd": 35,
            "transferSize": 1024,
        },
    ]
    driver.script_results["getEntries"] = json.dumps(entries)

    result = BrowserNetworkRequests().execute({}, browser)

    assert result.message == "Retrieved 1 network requests"
    assert result.requests == [
        {
            "url": "https://example.com/app.js",
            "type": "script",
            "duration": 25,
            "size": 1024,
        }
    ]


def test_console_messages_from_browser_log(browser, driver):
    driver.browser_log = [
        {"level": "SEVERE", "message": "boom", "timestamp": 1},
        {"level": "WARNING", "message": "careful", "timestamp": 2},
        {"level": "DEBUG", "message": "noise", "timestamp": 3},
    ]

    result = BrowserConsoleMessages().execute({}, browser)

    assert [m["level"] for m in result.messages] == ["error", "warning", "log"]


def test_console_messages_fall_back_to_script(browser, driver, monkeypatch):
    def no_log(log_type):
        raise WebDriverException("log type not supported")

    monkeypatch.setattr(driver, "get_log", no_log)
    captured = [{"level": "info", "message": "hi", "timestamp": 1}]
    driver.script_results["_seleniumConsoleLogs"] = captured

    result = BrowserConsoleMessages().execute({}, browser)

    assert result.messages == captured
    assert "using JavaScript" in result.message


def test_frame_switch_back_to_main_content(browser, driver):
    result = BrowserFrameSwitch().execute({"default": True, "parent": False}, browser)

    assert result.message == "Switched to main content"
    assert driver.switch_to.frames == ["default"]


def test_frame_switch_by_index(browser, driver):
    BrowserFrameSwitch().execute({"index": 1}, browser)
    assert driver.switch_to.frames == [1]


def test_wait_for_fixed_time(browser):
    result = BrowserWaitFor().execute({"time": 0.01}, browser)
    assert result.message == "Waited for 0.01 seconds"


def test_wait_for_text(browser, driver):
    driver.script_results["innerText"] = "Welcome back, user"

    result = BrowserWaitFor().execute({"text": "Welcome"}, browser)

    assert result.message == "Text appeared: Welcome"


def test_wait_for_text_timeout_is_not_an_error(browser, driver):
    result = BrowserWaitFor().execute({"text": "Missing", "time": 0.2}, browser)
    assert result.message == "Timeout waiting for text to appear: Missing"


def test_wait_for_text_gone(browser, driver):
    driver.script_results["innerText"] = "Done"

    result = BrowserWaitFor().execute({"textGone": "Loading"}, browser)

    assert result.message == "Text disappeared: Loading"


def test_handle_prompt_dialog(browser, driver):
    alert = FakeAlert("Your name?")
    driver.switch_to.open_alert = alert

    result = BrowserHandleDialog().execute(
        {"accept": True, "promptText": "Ada"}, browser
    )

    assert alert.typed == "Ada"
    assert alert.outcome == "accepted"
    assert result.message == "Handled dialog: accepted, text: Your name?"


def test_dismiss_dialog(browser, driver):
    alert = FakeAlert("Leave page?")
    driver.switch_to.open_alert = alert

    BrowserHandleDialog().execute({"accept": False}, browser)

    assert alert.outcome == "dismissed"


def test_no_dialog_present(browser, driver, monkeypatch):
    monkeypatch.setattr(handle_dialog, "DIALOG_TIMEOUT", 0.05)

    with pytest.raises(ToolError) as exc_info:
        BrowserHandleDialog().execute({"accept": True}, browser)

    assert exc_info.value.message == "No dialog is present"


def test_tab_new_soft_failure(server_config):
    from selenium_mcp.browser.manager import BrowserManager

    browser = BrowserManager(server_config, driver_factory=DriverFactory(block_popups=True))

    result = BrowserTabNew().execute({"url": "https://example.com"}, browser)

    assert result.opened is False
    assert browser.get_current_tab_index() == 0
    browser.close()


def test_tab_close_defaults_to_current(browser, driver):
    browser.open_new_tab()

    result = BrowserTabClose().execute({}, browser)

    assert result.message == "Closed tab at index 1"
    assert len(browser.get_open_tabs()) == 1


@pytest.mark.parametrize("kind", ["missing", "directory"])
def test_file_upload_rejects_bad_paths(browser, tmp_path, kind):
    path = tmp_path / "nope.txt" if kind == "missing" else tmp_path

    with pytest.raises(ToolError) as exc_info:
        BrowserFileUpload().execute({"paths": [str(path)]}, browser)

    expected = "File does not exist" if kind == "missing" else "Path is not a file"
    assert expected in exc_info.value.message


def test_file_upload_sends_resolved_paths(browser, driver, tmp_path):
    first, second = tmp_path / "a.txt", tmp_path / "b.txt"
    first.write_text("a")
    second.write_text("b")
    file_input = FakeElement("upload", displayed=False)
    driver.locators[(By.CSS_SELECTOR, "input[type='file']")] = [file_input]

    result = BrowserFileUpload().execute({"paths": [str(first), str(second)]}, browser)

    assert result.message == "Uploaded 2 file(s)"
    assert file_input.sent_keys == [f"{first.resolve()}\n{second.resolve()}"]
    assert any(args == (file_input,) for _, args in driver.scripts)


def test_file_upload_without_input(browser, driver, tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("a")

    with pytest.raises(ToolError) as exc_info:
        BrowserFileUpload().execute({"paths": [str(path)]}, browser)

    assert "Could not find a file input" in exc_info.value.message

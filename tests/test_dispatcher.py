import json
import uuid

import pytest

from selenium_mcp import __version__
from selenium_mcp.server.base import MCPServer
from selenium_mcp.tool.catalog import create_tool_collection


class RecordingServer(MCPServer):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sent = []

    def send_message(self, message):
        self.sent.append(json.loads(message))

    def start(self):
        pass


@pytest.fixture
def server(server_config, browser):
    return RecordingServer(server_config, browser=browser)


def call(server, name, params=None, request_id="1"):
    server.handle_message(
        json.dumps({"type": "toolCall", "id": request_id, "name": name, "params": params or {}})
    )
    return server.sent[-1]


def test_unknown_tool_reports_error_with_caller_id(server):
    server.handle_message(
        '{"type":"toolCall","id":"42","name":"no_such_tool","params":{}}'
    )

    assert len(server.sent) == 1
    response = server.sent[0]
    assert response["type"] == "toolCallResult"
    assert response["id"] == "42"
    assert "no_such_tool" in response["error"]["message"]
    assert "result" not in response


def test_numeric_ids_are_echoed_as_strings(server):
    server.handle_message('{"type":"toolCall","id":42,"name":"no_such_tool"}')
    assert server.sent[0]["id"] == "42"


@pytest.mark.parametrize("raw", ["not json", "[1, 2]", '{"id": "1"}', '"text"'])
def test_malformed_messages_get_out_of_band_error(server, raw):
    server.handle_message(raw)

    assert len(server.sent) == 1
    error = server.sent[0]
    assert error["type"] == "error"
    assert error["message"]
    uuid.UUID(error["id"])


def test_unknown_message_type_is_ignored(server):
    server.handle_message('{"type":"ping","id":"7"}')
    assert server.sent == []


@pytest.mark.parametrize("message_type", ["initialize", "toolCall"])
def test_requests_without_id_are_malformed(server, message_type):
    server.handle_message(json.dumps({"type": message_type, "name": "browser_close"}))

    assert len(server.sent) == 1
    assert server.sent[0]["type"] == "error"


def test_initialize_lists_every_registered_tool(server):
    server.handle_message('{"type":"initialize","id":"1"}')

    response = server.sent[0]
    assert response["type"] == "initialize"
    assert response["id"] == "1"
    assert response["serverInfo"] == {"name": "selenium-mcp", "version": __version__}
    assert len(response["tools"]) == len(server.tools) == 25
    descriptor = next(t for t in response["tools"] if t["name"] == "browser_navigate")
    assert descriptor == {
        "name": "browser_navigate",
        "title": "Navigate to a URL",
        "description": "Navigate to a URL",
        "readOnly": False,
        "parameterSchema": {
            "type": "object",
            "properties": {
                "url": {"type": "string", "description": "The URL to navigate to"}
            },
            "required": ["url"],
        },
    }


def test_initialize_with_only_tabs_capability(server_config, browser):
    tools = create_tool_collection({"tabs"})
    server = RecordingServer(server_config, browser=browser, tools=tools)

    server.handle_message('{"type":"initialize","id":"1"}')

    names = {t["name"] for t in server.sent[0]["tools"]}
    assert len(names) == 23
    assert "browser_tab_new" in names
    assert "browser_file_upload" not in names
    assert "browser_install" not in names


def test_disabled_tools_are_unknown(server_config, browser):
    server = RecordingServer(
        server_config, browser=browser, tools=create_tool_collection(set())
    )

    response = call(server, "browser_tab_list")

    assert "Unknown tool" in response["error"]["message"]


def test_resize_validation_has_no_side_effects(server, driver_factory):
    response = call(server, "browser_resize", {"width": 0, "height": 720})

    assert "positive numbers" in response["error"]["message"]
    assert driver_factory.calls == 0


def test_resize_applies_window_size(server, driver_factory):
    response = call(server, "browser_resize", {"width": 800, "height": 600})

    assert response["result"] == {"message": "Resized browser window to 800x600"}
    assert driver_factory.last.window_size == (800, 600)


def test_validation_error_names_the_parameter(server):
    response = call(server, "browser_navigate", {})
    assert "'url'" in response["error"]["message"]


def test_execution_error_uses_driver_message(server):
    response = call(server, "browser_click", {"element": "Login", "ref": "login"})

    assert response["error"]["message"] == "Could not find element with reference: login"


def test_navigate_prepends_scheme(server, driver_factory):
    response = call(server, "browser_navigate", {"url": "example.com"})

    assert response["result"]["message"] == "Navigated to https://example.com"
    assert driver_factory.last.current_url == "https://example.com"


def test_tab_round_trip(server):
    call(server, "browser_tab_new", {"url": "https://example.com"})
    response = call(server, "browser_tab_list", request_id="2")

    assert response["id"] == "2"
    tabs = response["result"]["tabs"]
    assert len(tabs) == 2
    assert tabs[1]["current"] is True
    assert tabs[1]["url"] == "https://example.com"


def test_tab_select_out_of_range(server):
    response = call(server, "browser_tab_select", {"index": 3})
    assert response["error"]["message"] == "Invalid tab index: 3. Only 1 tabs are open."


def test_shutdown_closes_browser_once(server, driver_factory):
    call(server, "browser_navigate", {"url": "https://example.com"})

    server.shutdown()
    server.shutdown()

    assert driver_factory.last.quit_count == 1

"""Transport-agnostic protocol dispatcher."""

import threading
from abc import ABC, abstractmethod
from typing import Optional

from selenium.common.exceptions import WebDriverException

from selenium_mcp import __version__
from selenium_mcp.browser.manager import BrowserManager
from selenium_mcp.config import ServerConfig
from selenium_mcp.exceptions import EnvelopeError, ToolError, UnknownToolError
from selenium_mcp.schema import (
    ErrorMessage,
    InitializeResult,
    MessageType,
    Ready,
    Request,
    ServerInfo,
    ToolCallResult,
)
from selenium_mcp.tool.catalog import create_tool_collection
from selenium_mcp.tool.tool_collection import ToolCollection
from selenium_mcp.utils.logger import logger

SERVER_NAME = "selenium-mcp"


def error_message(exc: BaseException) -> str:
    """Human-readable message for an exception raised by a tool."""
    if isinstance(exc, ToolError) and exc.message:
        return str(exc.message)
    if isinstance(exc, WebDriverException) and exc.msg:
        return exc.msg
    return str(exc) or type(exc).__name__


class MCPServer(ABC):
    """Parses envelopes, routes them to tools and emits responses.

    Every ``toolCall`` produces exactly one ``toolCallResult`` carrying the
    caller's id; tool failures never escape ``handle_message``. Subclasses
    only implement ``send_message``.
    """

    def __init__(
        self,
        config: ServerConfig,
        browser: Optional[BrowserManager] = None,
        tools: Optional[ToolCollection] = None,
    ):
        self.config = config
        self.browser = browser or BrowserManager(config)
        self.tools = tools if tools is not None else create_tool_collection(config.capabilities)
        self._shutdown_lock = threading.Lock()
        self._shut_down = False

    @abstractmethod
    def send_message(self, message: str) -> None:
        """Deliver one serialized envelope to the client."""

    def send_ready(self):
        self.send_message(Ready().to_json())

    def send_error(self, message: str):
        self.send_message(ErrorMessage(message=message).to_json())

    def handle_message(self, raw: str):
        logger.debug(f"Received message: {raw}")
        try:
            request = Request.parse(raw)
        except EnvelopeError as e:
            logger.warning(f"Malformed message: {e}")
            self.send_error(str(e))
            return

        if request.type == MessageType.INITIALIZE:
            if request.id is None:
                self.send_error("initialize request is missing an id")
                return
            self._handle_initialize(request)
        elif request.type == MessageType.TOOL_CALL:
            if request.id is None:
                self.send_error("toolCall request is missing an id")
                return
            self._handle_tool_call(request)
        else:
            logger.warning(f"Ignoring message with unknown type: {request.type}")

    def _handle_initialize(self, request: Request):
        response = InitializeResult(
            id=request.id,
            serverInfo=ServerInfo(name=SERVER_NAME, version=__version__),
            tools=self.tools.to_params(),
        )
        logger.info(f"Initialized with {len(self.tools)} tools")
        self.send_message(response.to_json())

    def _handle_tool_call(self, request: Request):
        try:
            if not request.name:
                raise ToolError("toolCall request is missing a tool name")
            tool = self.tools.get_tool(request.name)
            if tool is None:
                raise UnknownToolError(request.name)
            logger.info(f"Executing tool: {tool.name}")
            result = tool.execute(request.params or {}, self.browser)
            response = ToolCallResult.success(request.id, result.to_dict())
            logger.info(f"Tool execution completed: {tool.name}")
        except Exception as e:
            logger.error(f"Tool call {request.name} failed: {error_message(e)}")
            response = ToolCallResult.failure(request.id, error_message(e))
        self.send_message(response.to_json())

    def shutdown(self):
        """Close the browser. Safe to call from any exit path; runs once."""
        with self._shutdown_lock:
            if self._shut_down:
                return
            self._shut_down = True
        try:
            self.browser.close()
        except Exception as e:
            logger.error(f"Error during browser teardown: {e}")
        logger.info("Server shut down")

    @abstractmethod
    def start(self) -> None:
        """Run the transport until it ends."""

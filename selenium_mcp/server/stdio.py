import io
import sys
from typing import Optional, TextIO

from selenium_mcp.browser.manager import BrowserManager
from selenium_mcp.config import ServerConfig
from selenium_mcp.server.base import MCPServer
from selenium_mcp.tool.tool_collection import ToolCollection
from selenium_mcp.utils.logger import logger


def utf8_lines(stream: TextIO) -> TextIO:
    """Re-open a text stream so undecodable bytes become U+FFFD instead of raising."""
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        return stream
    return io.TextIOWrapper(buffer, encoding="utf-8", errors="replace")


class StdioServer(MCPServer):
    """One JSON envelope per line on stdin, one per line on stdout."""

    def __init__(
        self,
        config: ServerConfig,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        browser: Optional[BrowserManager] = None,
        tools: Optional[ToolCollection] = None,
    ):
        super().__init__(config, browser=browser, tools=tools)
        self.stdin = stdin or utf8_lines(sys.stdin)
        self.stdout = stdout or sys.stdout

    def send_message(self, message: str):
        logger.debug(f"Sending message: {message}")
        self.stdout.write(message + "\n")
        self.stdout.flush()

    def start(self):
        logger.info("Starting stdio transport")
        try:
            self.send_ready()
            for line in self.stdin:
                line = line.strip()
                if not line:
                    continue
                self.handle_message(line)
            logger.info("End of input, stopping stdio transport")
        finally:
            self.shutdown()

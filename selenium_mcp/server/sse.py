"""HTTP + Server-Sent Events transport.

``GET /sse`` holds the single event stream, ``POST /sse`` submits one
envelope whose responses go out over that stream. Messages produced while no
stream is attached wait in a FIFO queue and are flushed, after the ready
signal, to the next subscriber.
"""

import asyncio
import threading
from collections import deque
from typing import AsyncIterator, Deque, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, Response, StreamingResponse
from starlette.concurrency import run_in_threadpool

from selenium_mcp import __version__
from selenium_mcp.browser.manager import BrowserManager
from selenium_mcp.config import DEFAULT_SSE_PORT, ServerConfig
from selenium_mcp.schema import Ready
from selenium_mcp.server.base import SERVER_NAME, MCPServer
from selenium_mcp.tool.tool_collection import ToolCollection
from selenium_mcp.utils.logger import logger

KEEPALIVE_INTERVAL = 15.0

_INDEX_PAGE = """<!DOCTYPE html>
<html>
<head><title>{name}</title></head>
<body>
<h1>{name} {version}</h1>
<p>Open an event stream with <code>GET /sse</code> and send requests with
<code>POST /sse</code>.</p>
</body>
</html>
"""


class _Subscriber:
    """One attached event stream.

    ``messages`` is only touched under the server lock; ``wakeup`` is set
    from any thread through the subscriber's event loop.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop):
        self.loop = loop
        self.messages: Deque[str] = deque()
        self.wakeup = asyncio.Event()
        self.closed = False

    def notify(self):
        self.loop.call_soon_threadsafe(self.wakeup.set)


class SSEServer(MCPServer):
    def __init__(
        self,
        config: ServerConfig,
        browser: Optional[BrowserManager] = None,
        tools: Optional[ToolCollection] = None,
    ):
        super().__init__(config, browser=browser, tools=tools)
        self.host = config.transport.host
        self.port = config.transport.port or DEFAULT_SSE_PORT
        self._lock = threading.Lock()
        self._pending: Deque[str] = deque()
        self._subscriber: Optional[_Subscriber] = None
        self.app = self.create_app()

    @property
    def pending_messages(self):
        with self._lock:
            return list(self._pending)

    def send_message(self, message: str):
        with self._lock:
            subscriber = self._subscriber
            if subscriber is None:
                logger.debug("No SSE client connected, queueing message")
                self._pending.append(message)
                return
            subscriber.messages.append(message)
        subscriber.notify()

    def attach_subscriber(self) -> _Subscriber:
        """Register a new stream, replacing (and ending) any previous one.

        Must be called from the event loop that will consume the stream.
        """
        subscriber = _Subscriber(asyncio.get_running_loop())
        with self._lock:
            previous = self._subscriber
            if previous is not None:
                subscriber.messages.extend(previous.messages)
                previous.messages.clear()
            subscriber.messages.extend(self._pending)
            self._pending.clear()
            self._subscriber = subscriber
        if previous is not None:
            logger.info("New SSE client replaces the existing connection")
            previous.closed = True
            previous.notify()
        logger.info("SSE client connected")
        return subscriber

    def _detach(self, subscriber: _Subscriber):
        with self._lock:
            if self._subscriber is subscriber:
                self._subscriber = None
            # undelivered messages go back to the front of the queue
            self._pending.extendleft(reversed(subscriber.messages))
            subscriber.messages.clear()
        logger.info("SSE client disconnected")

    def _next_message(self, subscriber: _Subscriber) -> Optional[str]:
        with self._lock:
            if subscriber.messages:
                return subscriber.messages.popleft()
            subscriber.wakeup.clear()
            return None

    async def stream_events(self, subscriber: _Subscriber) -> AsyncIterator[str]:
        """Yield SSE frames for ``subscriber`` until it is replaced or closed."""
        try:
            yield f"data: {Ready().to_json()}\n\n"
            while not subscriber.closed:
                message = self._next_message(subscriber)
                if message is not None:
                    yield f"data: {message}\n\n"
                    continue
                try:
                    await asyncio.wait_for(
                        subscriber.wakeup.wait(), timeout=KEEPALIVE_INTERVAL
                    )
                except asyncio.TimeoutError:
                    yield ": keep-alive\n\n"
        finally:
            self._detach(subscriber)

    async def _handle_post(self, request: Request) -> Response:
        body = await request.body()
        raw = body.decode("utf-8", errors="replace")
        if not raw.strip():
            return Response(status_code=202)
        await run_in_threadpool(self.handle_message, raw)
        return Response(status_code=202)

    def create_app(self) -> FastAPI:
        app = FastAPI(title="Selenium MCP Server", version=__version__)
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )

        @app.get("/", response_class=HTMLResponse)
        async def index():
            return _INDEX_PAGE.format(name=SERVER_NAME, version=__version__)

        @app.get("/sse")
        async def events():
            subscriber = self.attach_subscriber()
            return StreamingResponse(
                self.stream_events(subscriber),
                media_type="text/event-stream",
                headers={
                    "Cache-Control": "no-cache",
                    "Connection": "keep-alive",
                    "X-Accel-Buffering": "no",
                },
            )

        @app.post("/sse", status_code=202)
        async def submit(request: Request):
            return await self._handle_post(request)

        return app

    def start(self):
        logger.info(f"Starting SSE transport on http://{self.host}:{self.port}/sse")
        try:
            uvicorn.run(
                self.app,
                host=self.host,
                port=self.port,
                log_level=self.config.log.level.lower(),
            )
        finally:
            self.shutdown()

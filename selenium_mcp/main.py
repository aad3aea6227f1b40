"""Command line entry point for the Selenium MCP server."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from selenium_mcp.config import DEFAULT_SSE_PORT, ServerConfig, config
from selenium_mcp.server.base import MCPServer
from selenium_mcp.utils.logger import define_log_level, logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="selenium-mcp",
        description="Expose Selenium browser automation as remotely callable tools",
    )
    parser.add_argument(
        "--port",
        type=int,
        help=f"Port to listen on for SSE transport (default: {DEFAULT_SSE_PORT}); stdio is used when omitted",
    )
    parser.add_argument("--host", help="Host to bind server to (default: localhost)")
    parser.add_argument("--browser", help="Browser to use (chrome, firefox, edge, safari)")
    parser.add_argument(
        "--headless",
        action="store_true",
        default=None,
        help="Run browser in headless mode",
    )
    parser.add_argument("--executable-path", help="Path to the WebDriver executable")
    parser.add_argument("--user-data-dir", help="Path to user data directory")
    parser.add_argument(
        "--isolated",
        action="store_true",
        default=None,
        help="Keep browser profile in memory, do not save to disk",
    )
    parser.add_argument(
        "--viewport-size", help='Browser viewport size in pixels, e.g. "1280,720"'
    )
    parser.add_argument(
        "--caps",
        help="Comma-separated list of capabilities to enable (tabs,history,wait,files,install)",
    )
    parser.add_argument("--output-dir", help="Path to directory for output files")
    parser.add_argument("--config", type=Path, help="Path to a TOML config file")
    parser.add_argument("--log-level", help="Console log level (default: INFO)")
    return parser


def parse_viewport(value: str) -> Optional[Tuple[int, int]]:
    """Parse ``"W,H"``; invalid values are logged and ignored."""
    parts = value.split(",")
    if len(parts) != 2:
        logger.warning(f"Invalid viewport size format: {value}")
        return None
    try:
        width, height = int(parts[0].strip()), int(parts[1].strip())
    except ValueError:
        logger.warning(f"Invalid viewport size format: {value}")
        return None
    if width <= 0 or height <= 0:
        logger.warning(f"Invalid viewport size format: {value}")
        return None
    return width, height


def parse_capabilities(value: str) -> set:
    return {cap.strip() for cap in value.split(",") if cap.strip()}


def apply_cli_overrides(server_config: ServerConfig, args: argparse.Namespace) -> ServerConfig:
    """Layer command line flags over the file configuration."""
    browser_updates = {
        "name": args.browser,
        "headless": args.headless,
        "executable_path": args.executable_path,
        "user_data_dir": args.user_data_dir,
        "isolated": args.isolated,
    }
    if args.viewport_size:
        viewport = parse_viewport(args.viewport_size)
        if viewport:
            browser_updates["viewport_width"], browser_updates["viewport_height"] = viewport
    browser_updates = {k: v for k, v in browser_updates.items() if v is not None}

    transport_updates = {
        k: v for k, v in {"host": args.host, "port": args.port}.items() if v is not None
    }

    updates = {
        "browser": server_config.browser.model_copy(update=browser_updates),
        "transport": server_config.transport.model_copy(update=transport_updates),
    }
    if args.log_level:
        updates["log"] = server_config.log.model_copy(
            update={"level": args.log_level.upper()}
        )
    if args.caps is not None:
        updates["capabilities"] = parse_capabilities(args.caps)
    if args.output_dir:
        updates["output_dir"] = args.output_dir
    return server_config.model_copy(update=updates)


def create_server(server_config: ServerConfig) -> MCPServer:
    if server_config.use_sse:
        from selenium_mcp.server.sse import SSEServer

        return SSEServer(server_config)

    from selenium_mcp.server.stdio import StdioServer

    return StdioServer(server_config)


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.config is not None and not args.config.is_file():
        parser.error(f"config file not found: {args.config}")

    server_config = apply_cli_overrides(config.load(args.config), args)
    define_log_level(
        print_level=server_config.log.level,
        logfile_level=server_config.log.file_level,
        log_dir=server_config.log.log_dir,
        name="selenium-mcp",
    )

    server = None
    try:
        server = create_server(server_config)
        transport = "SSE" if server_config.use_sse else "stdio"
        logger.info(f"Starting Selenium MCP server with {transport} transport")
        server.start()
    except KeyboardInterrupt:
        logger.warning("Operation interrupted.")
    except Exception:
        logger.exception("Failed to start Selenium MCP server")
        sys.exit(1)
    finally:
        if server is not None:
            server.shutdown()


if __name__ == "__main__":
    main()

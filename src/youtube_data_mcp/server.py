"""
YouTube Data MCP Server - Main server implementation.

Exposes read-only YouTube Data API lookups and transcripts as MCP tools,
served over streamable HTTP or stdio.
"""

import argparse
import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator
from typing import Any, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from mcp.types import CallToolResult, Tool
from starlette.applications import Starlette
from starlette.routing import Mount
from starlette.types import Receive, Scope, Send

from . import __version__
from .config import LOG_LEVELS, TRANSPORTS, ServerConfig, normalize_log_level, setup_logging
from .dispatcher import ToolDispatcher


logger = logging.getLogger(__name__)

SERVER_NAME = "youtube-data-mcp"
MCP_PATH = "/mcp"


class YouTubeMCPServer:
    """YouTube MCP Server with video, transcript, channel and playlist tools."""

    def __init__(self, config: ServerConfig, dispatcher: Optional[ToolDispatcher] = None):
        self.config = config
        self.dispatcher = dispatcher or ToolDispatcher(config)

        # MCP Server
        self.server = Server(SERVER_NAME, version=__version__)
        self._setup_handlers()

    def _setup_handlers(self):
        """Setup MCP tool handlers."""

        @self.server.list_tools()
        async def list_tools() -> list[Tool]:
            return self.dispatcher.list_tools()

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
            return await self.dispatcher.call_tool(name, arguments)

    async def run_stdio(self):
        """Run the MCP server over stdio."""
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )

    def create_http_app(self) -> Starlette:
        """Build the ASGI app serving stateless streamable HTTP at /mcp."""
        session_manager = StreamableHTTPSessionManager(
            app=self.server,
            event_store=None,
            json_response=True,
            stateless=True,
        )

        async def handle_mcp(scope: Scope, receive: Receive, send: Send) -> None:
            await session_manager.handle_request(scope, receive, send)

        @contextlib.asynccontextmanager
        async def lifespan(app: Starlette) -> AsyncIterator[None]:
            async with session_manager.run():
                logger.info("Streamable HTTP session manager started")
                yield

        return Starlette(
            routes=[Mount(MCP_PATH, app=handle_mcp)],
            lifespan=lifespan,
        )

    def run_http(self):
        """Run the MCP server over streamable HTTP."""
        import uvicorn

        logger.info("Listening on http://%s:%d%s", self.config.host, self.config.port, MCP_PATH)
        uvicorn.run(
            self.create_http_app(),
            host=self.config.host,
            port=self.config.port,
            log_level=normalize_log_level(self.config.log_level).lower(),
        )

    def run(self):
        if self.config.transport == "stdio":
            asyncio.run(self.run_stdio())
        else:
            self.run_http()


def parse_arguments(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments; each overrides its environment variable."""
    parser = argparse.ArgumentParser(
        prog=SERVER_NAME,
        description="YouTube Data MCP Server - YouTube lookups as MCP tools",
    )
    parser.add_argument("--transport", choices=TRANSPORTS, help="Transport to serve (env: YOUTUBE_MCP_TRANSPORT)")
    parser.add_argument("--host", help="HTTP bind host (env: YOUTUBE_MCP_HOST)")
    parser.add_argument("--port", type=int, help="HTTP port (env: PORT)")
    parser.add_argument(
        "--log-level",
        type=normalize_log_level,
        choices=LOG_LEVELS,
        help="Logging level (env: YOUTUBE_MCP_LOG_LEVEL)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None):
    """Main entry point."""
    args = parse_arguments(argv)

    config = ServerConfig.from_env().with_overrides(
        transport=args.transport,
        host=args.host,
        port=args.port,
        log_level=args.log_level,
    )
    setup_logging(config.log_level)

    if not config.has_credential:
        logger.error("YOUTUBE_API_KEY environment variable is required; tool calls will fail until it is set.")

    server = YouTubeMCPServer(config)
    server.run()


if __name__ == "__main__":
    main()

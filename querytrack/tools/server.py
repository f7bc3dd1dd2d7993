"""Tool server exposing log_query and show_dashboard over MCP stdio.

Tool failures (bad arguments, unknown tools, I/O, no data) are raised from the
call handler and come back to the caller as results with `isError: true`.
"""

import anyio
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from querytrack import __version__
from querytrack.core.config_loader import ConfigLoader
from querytrack.core.errors import QueryTrackError
from querytrack.service import QueryTrackService
from querytrack.utils.logger import set_level, setup_logger
from querytrack.utils.viewer import open_in_viewer

from .dispatcher import ToolDispatcher

logger = setup_logger(__name__)

SERVER_NAME = "query-counter-mcp"


def build_server(dispatcher: ToolDispatcher) -> Server:
    """Wire a dispatcher into an MCP server; transport is chosen by the caller."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [tool.to_tool() for tool in dispatcher.list_tools()]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict | None) -> list[types.TextContent]:
        try:
            result = dispatcher.call_tool(name, arguments)
        except QueryTrackError as e:
            logger.warning(f"Tool {name} failed: {e}")
            raise
        return result.to_content()

    return server


async def serve(dispatcher: ToolDispatcher) -> None:
    """Run until the client closes stdin."""
    server = build_server(dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Query Counter tool server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main():
    """Console entry point: resolve config once, then serve until stdin closes."""
    config = ConfigLoader.from_env()
    set_level(config.log_level)
    logger.info(f"Logging {config.log_format.value} queries to {config.log_path}")

    service = QueryTrackService(config, opener=open_in_viewer)
    anyio.run(serve, ToolDispatcher(service))


if __name__ == "__main__":
    main()

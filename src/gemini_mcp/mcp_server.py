"""
Gemini MCP Server - stdio transport.
"""
import asyncio
import logging
from typing import Any

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from . import __version__
from .bootstrap import bootstrap
from .tools import Dispatcher

logger = logging.getLogger(__name__)

SERVER_NAME = "gemini-server"


def create_server(dispatcher: Dispatcher) -> Server:
    """Expose the dispatcher's tools on a low-level MCP server."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return dispatcher.list_tools()

    # The dispatcher validates arguments itself and reports problems as isError results
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
        return await dispatcher.dispatch(name, arguments)

    return server


async def serve(dispatcher: Dispatcher) -> None:
    server = create_server(dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Gemini MCP Server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    _, dispatcher = bootstrap()
    asyncio.run(serve(dispatcher))


if __name__ == "__main__":
    main()

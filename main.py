"""
Main entry point for the YouTube Data API MCP server.
"""

import asyncio
import signal
import sys
import time
from typing import Any, Dict, List

import mcp.types as types
from dotenv import load_dotenv
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from auth import Capability, CredentialResolver, resolve_credentials
from dispatcher import Dispatcher
from errors import ConfigurationError, ToolCallFailed

# Load environment variables from .env file
load_dotenv()

SERVER_NAME = "youtube-data"
SERVER_VERSION = "1.0.0"


# Signal handler for graceful shutdown
def signal_handler(sig, frame):
    print(f"Received signal {sig}, shutting down gracefully", file=sys.stderr)
    sys.exit(0)


def create_server(dispatcher: Dispatcher) -> Server:
    """Build the MCP server exposing every registered operation as a tool."""
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [op.as_tool() for op in dispatcher.registry.list_operations()]

    # Arguments are validated by the dispatcher against the same schemas.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[types.TextContent]:
        response = await dispatcher.invoke(name, arguments)
        if response.is_error:
            raise ToolCallFailed(response.error)
        return [types.TextContent(type="text", text=response.text)]

    return server


async def serve(dispatcher: Dispatcher) -> None:
    server = create_server(dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main():
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    print(f"Starting YouTube MCP server initialization at {time.time()}", file=sys.stderr)
    try:
        state = resolve_credentials()
    except ConfigurationError as e:
        print(f"Configuration error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    if state.capability is Capability.READ_WRITE:
        print("Using OAuth 2.0 authentication (read + write)", file=sys.stderr)
    else:
        print("Using API key authentication (read-only)", file=sys.stderr)

    dispatcher = Dispatcher(CredentialResolver(state))
    print(f"Serving {len(dispatcher.registry)} tools over stdio", file=sys.stderr)
    asyncio.run(serve(dispatcher))


if __name__ == "__main__":
    main()

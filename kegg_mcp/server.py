"""KEGG MCP server over stdio."""
import asyncio
import logging
import sys
from typing import Optional, TextIO

from . import SERVER_NAME, __version__
from .config import ServerConfig
from .jsonrpc.handler import JSONRPCHandler
from .kegg.client import KEGGClient
from .kegg.tools import KEGGTools, register_kegg_tools
from .mcp_handler import MCPHandler
from .mcp_transport import StdioTransport
from .tool_executor import ToolExecutor
from .tool_registry import ToolRegistry

logger = logging.getLogger(__name__)


def build_jsonrpc_handler(config: ServerConfig, client: KEGGClient) -> JSONRPCHandler:
    """Wire the tool registry, executor and MCP methods into a JSON-RPC handler."""
    registry = ToolRegistry()
    register_kegg_tools(registry, KEGGTools(client))

    executor = ToolExecutor(timeout=config.tool_timeout or None)
    jsonrpc_handler = JSONRPCHandler(standard_error_codes=config.standard_error_codes)
    MCPHandler(registry, executor).register(jsonrpc_handler)

    logger.info(f"Registered {len(registry)} MCP tools")
    logger.info(f"Registered {len(jsonrpc_handler.methods)} JSON-RPC methods")
    return jsonrpc_handler


async def serve(
    config: ServerConfig,
    input: Optional[TextIO] = None,
    output: Optional[TextIO] = None,
) -> None:
    """Run the server until the input stream ends."""
    async with KEGGClient(config.kegg_rest_base, timeout=config.kegg_timeout) as client:
        jsonrpc_handler = build_jsonrpc_handler(config, client)
        transport = StdioTransport(
            jsonrpc_handler,
            input if input is not None else sys.stdin,
            output if output is not None else sys.stdout,
        )
        logger.info(f"Starting {SERVER_NAME} {__version__} (KEGG at {config.kegg_rest_base})")
        await transport.run()
    logger.info(f"Shutting down {SERVER_NAME}")


def configure_logging(level: str) -> None:
    # stdout carries protocol messages only
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> int:
    config = ServerConfig.from_env()
    configure_logging(config.log_level)
    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
        return 130
    return 0

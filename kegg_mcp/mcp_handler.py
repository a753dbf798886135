"""MCP protocol methods: initialize, tools/list, tools/call and ping."""
from typing import Any, Dict
import logging

from . import SERVER_NAME, __version__
from .jsonrpc.handler import JSONRPCHandler
from .tool_executor import ToolExecutor
from .tool_registry import ToolRegistry

logger = logging.getLogger(__name__)

MCP_PROTOCOL_VERSION = "2024-11-05"


class MCPHandler:
    """The MCP method table over a tool registry and executor."""

    def __init__(
        self,
        registry: ToolRegistry,
        executor: ToolExecutor,
        server_name: str = SERVER_NAME,
        server_version: str = __version__,
    ):
        self.registry = registry
        self.executor = executor
        self.server_info = {"name": server_name, "version": server_version}

    async def initialize(self, params: Dict[str, Any]) -> Dict[str, Any]:
        client = params.get("clientInfo")
        if client:
            logger.info(f"Initialize from client: {client}")
        return {
            "protocolVersion": MCP_PROTOCOL_VERSION,
            "capabilities": {"tools": {}},
            "serverInfo": dict(self.server_info),
        }

    async def ping(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {}

    async def tools_list(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {"tools": self.registry.list_tools()}

    async def tools_call(self, params: Dict[str, Any]) -> Dict[str, Any]:
        name = params.get("name")
        arguments = params.get("arguments") or {}

        tool = self.registry.resolve(name)
        logger.info(f"Calling tool: {name}")
        result = await self.executor.execute(tool, arguments)
        return {"content": result.content_blocks()}

    def register(self, jsonrpc_handler: JSONRPCHandler) -> None:
        """Register all MCP methods on a JSON-RPC handler."""
        jsonrpc_handler.register_method("initialize", self.initialize)
        jsonrpc_handler.register_method("ping", self.ping)
        jsonrpc_handler.register_method("tools/list", self.tools_list)
        jsonrpc_handler.register_method("tools/call", self.tools_call)

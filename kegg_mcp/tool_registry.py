"""Tool registry: the static catalog of tools and name lookup."""
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Mapping
import logging

from .mcp_models import TextContent, ToolDescriptor
from .utils.errors import DuplicateToolError, UnknownToolError

logger = logging.getLogger(__name__)

ToolHandler = Callable[[Mapping[str, Any]], Awaitable[List[TextContent]]]


@dataclass(frozen=True)
class RegisteredTool:
    """A descriptor paired with the coroutine function that runs it."""

    descriptor: ToolDescriptor
    handler: ToolHandler
    error_label: str

    @property
    def name(self) -> str:
        return self.descriptor.name


class ToolRegistry:
    def __init__(self):
        self._tools: Dict[str, RegisteredTool] = {}

    def register_tool(
        self,
        name: str,
        description: str,
        input_schema: Dict[str, Any],
        handler: ToolHandler,
        error_label: str = "Error executing tool",
    ) -> None:
        """Register an MCP tool.

        Args:
            name: Unique tool name, matched exactly by ``tools/call``
            description: Human readable description for ``tools/list``
            input_schema: JSON schema object describing the arguments
            handler: Async callable taking the arguments mapping
            error_label: Prefix for the text block produced when the handler fails

        Raises:
            DuplicateToolError: If a tool with this name is already registered
        """
        if name in self._tools:
            raise DuplicateToolError(f"Tool already registered: {name}")

        self._tools[name] = RegisteredTool(
            descriptor=ToolDescriptor(
                name=name, description=description, inputSchema=input_schema
            ),
            handler=handler,
            error_label=error_label,
        )
        logger.info(f"Registered tool: {name}")

    def list_tools(self) -> List[Dict[str, Any]]:
        """List all registered tools in registration order."""
        return [tool.descriptor.model_dump() for tool in self._tools.values()]

    def resolve(self, name: str) -> RegisteredTool:
        """Look up a tool by exact name."""
        tool = self._tools.get(name) if isinstance(name, str) else None
        if tool is None:
            raise UnknownToolError(name)
        return tool

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

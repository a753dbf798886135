"""Runs tool handlers and normalizes their outcome."""
import asyncio
import logging
from typing import Any, Mapping, Optional

from .mcp_models import ToolResult
from .tool_registry import RegisteredTool

logger = logging.getLogger(__name__)


class ToolTimeout(Exception):
    pass


class ToolExecutor:
    """Invokes a registered tool and turns any failure into a ToolResult.

    Handler exceptions never escape: they become a single text block whose
    text is the tool's error label followed by the reason.
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    async def execute(
        self, tool: RegisteredTool, arguments: Mapping[str, Any]
    ) -> ToolResult:
        try:
            content = await self._run(tool, arguments)
        except ToolTimeout:
            logger.warning(f"Tool {tool.name} timed out after {self.timeout}s")
            return ToolResult.failed(
                f"{tool.error_label}: timed out after {self.timeout:g}s"
            )
        except Exception as e:
            logger.warning(f"Tool {tool.name} failed: {e}", exc_info=True)
            return ToolResult.failed(f"{tool.error_label}: {e}")

        return ToolResult.ok(list(content))

    async def _run(self, tool: RegisteredTool, arguments: Mapping[str, Any]):
        if not self.timeout:
            return await tool.handler(arguments)
        try:
            return await asyncio.wait_for(tool.handler(arguments), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise ToolTimeout() from e

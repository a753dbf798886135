"""MCP tool and content models."""
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict


class ToolDescriptor(BaseModel):
    """Name, description and input schema advertised by ``tools/list``."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    inputSchema: Dict[str, Any]


class TextContent(BaseModel):
    """A single text content block of a tool result."""

    type: Literal["text"] = "text"
    text: str


def text_block(text: str) -> TextContent:
    return TextContent(text=text)


class ToolResult(BaseModel):
    """Outcome of one tool call.

    A successful call carries its ordered content blocks; a "not found" answer
    is still a success. A failed call carries only the labelled reason and
    renders as a single text block.
    """

    content: List[TextContent] = []
    failure: Optional[str] = None

    @classmethod
    def ok(cls, content: List[TextContent]) -> "ToolResult":
        return cls(content=content)

    @classmethod
    def failed(cls, reason: str) -> "ToolResult":
        return cls(failure=reason)

    @property
    def is_error(self) -> bool:
        return self.failure is not None

    def content_blocks(self) -> List[Dict[str, Any]]:
        if self.failure is not None:
            return [text_block(self.failure).model_dump()]
        return [block.model_dump() for block in self.content]

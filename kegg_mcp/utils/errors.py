"""Custom exception classes for the MCP server."""
from ..jsonrpc.models import ErrorCode


class MCPError(Exception):
    """Base exception for MCP-related errors."""

    pass


class ProtocolError(MCPError):
    """Errors reported to the peer as a JSON-RPC ``error`` object."""

    code = ErrorCode.INTERNAL_ERROR

    @property
    def message(self) -> str:
        """Text placed in the error object's ``message`` field."""
        return str(self)


class InvalidRequestError(ProtocolError):
    """Decoded JSON that is not a JSON-RPC request object."""

    code = ErrorCode.INVALID_REQUEST


class MethodNotFoundError(ProtocolError):
    """Request for a method the server does not implement."""

    code = ErrorCode.METHOD_NOT_FOUND

    def __init__(self, method: str):
        super().__init__(f"Method not found: {method}")
        self.method = method


class UnknownToolError(ProtocolError):
    """tools/call naming a tool that is not registered."""

    code = ErrorCode.TOOL_NOT_FOUND

    def __init__(self, name):
        super().__init__(f"Unknown tool: {'' if name is None else name}")
        self.name = name

    @property
    def message(self) -> str:
        return f"Tool execution failed: {self}"


class DuplicateToolError(MCPError):
    """Two tools registered under the same name."""

    pass


class KEGGError(MCPError):
    """KEGG data source errors."""

    pass


class RecordParseError(KEGGError):
    """A KEGG flat-file record could not be parsed."""

    pass

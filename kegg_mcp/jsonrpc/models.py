"""JSON-RPC 2.0 request/response models."""
from pydantic import BaseModel, StrictBool, StrictFloat, StrictInt, StrictStr, model_validator
from typing import Any, Dict, Optional, Union, Literal

RequestId = Optional[Union[StrictBool, StrictInt, StrictFloat, StrictStr]]


class JSONRPCRequest(BaseModel):
    """JSON-RPC 2.0 request model."""

    jsonrpc: Literal["2.0"] = "2.0"
    method: str
    params: Optional[dict] = None
    id: RequestId = None


class JSONRPCError(BaseModel):
    """JSON-RPC 2.0 error model."""

    code: int
    message: str
    data: Optional[Any] = None


class JSONRPCResponse(BaseModel):
    """JSON-RPC 2.0 response model.

    Exactly one of ``result`` and ``error`` is set. ``id`` is always
    serialized, as ``null`` when the request had none or could not be parsed.
    """

    jsonrpc: Literal["2.0"] = "2.0"
    id: RequestId
    result: Optional[Dict[str, Any]] = None
    error: Optional[JSONRPCError] = None

    @model_validator(mode="after")
    def _check_result_or_error(self) -> "JSONRPCResponse":
        if (self.result is None) == (self.error is None):
            raise ValueError("exactly one of 'result' or 'error' must be set")
        return self

    @classmethod
    def success(cls, id: RequestId, result: Dict[str, Any]) -> "JSONRPCResponse":
        return cls(id=id, result=result)

    @classmethod
    def failure(cls, id: RequestId, code: int, message: str) -> "JSONRPCResponse":
        return cls(id=id, error=JSONRPCError(code=code, message=message))

    def to_wire(self) -> Dict[str, Any]:
        """Dump in wire order: jsonrpc, id, then result or error."""
        payload: Dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            payload["error"] = self.error.model_dump(exclude_none=True)
        else:
            payload["result"] = self.result
        return payload


class ErrorCode:
    """JSON-RPC error codes.

    ``GENERIC`` is sent for every protocol error unless the server runs with
    standard codes enabled, in which case the specific code is used.
    """

    GENERIC = -1

    # Standard JSON-RPC 2.0 error codes
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INTERNAL_ERROR = -32603

    # Custom application error codes
    TOOL_NOT_FOUND = -32001

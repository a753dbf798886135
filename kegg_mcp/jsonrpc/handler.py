"""JSON-RPC 2.0 request handler."""
from typing import Any, Awaitable, Callable, Dict
import json
import logging

from pydantic import ValidationError

from .models import (
    JSONRPCRequest,
    JSONRPCResponse,
    ErrorCode,
    RequestId,
)
from ..utils.errors import InvalidRequestError, MethodNotFoundError, ProtocolError

logger = logging.getLogger(__name__)

MethodHandler = Callable[[Dict[str, Any]], Awaitable[Dict[str, Any]]]


class JSONRPCHandler:
    """Handles JSON-RPC 2.0 requests and routes to registered methods.

    Every call produces exactly one response. Unless ``standard_error_codes``
    is set, all errors carry the code ``-1``.
    """

    def __init__(self, standard_error_codes: bool = False):
        self.methods: Dict[str, MethodHandler] = {}
        self.standard_error_codes = standard_error_codes

    def register_method(self, method_name: str, handler: MethodHandler):
        """Register a JSON-RPC method handler.

        Args:
            method_name: Name of the JSON-RPC method (e.g., "tools/list")
            handler: Async callable taking the params mapping
        """
        self.methods[method_name] = handler
        logger.info(f"Registered JSON-RPC method: {method_name}")

    async def handle_line(self, line: str) -> JSONRPCResponse:
        """Parse one line of input and handle it as a request.

        Args:
            line: A single line holding one JSON-RPC request

        Returns:
            JSONRPCResponse with result or error
        """
        try:
            payload = json.loads(line)
        except ValueError as e:
            logger.warning(f"JSON parsing error: {e}")
            return self.parse_error()

        try:
            request = self.parse_request(payload)
        except InvalidRequestError as e:
            logger.warning(f"Invalid request: {e}")
            return self._error(_recover_id(payload), e.code, e.message)

        return await self.handle_request(request)

    @staticmethod
    def parse_request(payload: Any) -> JSONRPCRequest:
        """Validate a decoded JSON value as a request object."""
        if not isinstance(payload, dict):
            raise InvalidRequestError("Invalid Request")
        try:
            return JSONRPCRequest.model_validate(payload)
        except ValidationError as e:
            raise InvalidRequestError("Invalid Request") from e

    async def handle_request(
        self,
        request: JSONRPCRequest
    ) -> JSONRPCResponse:
        """Handle a JSON-RPC 2.0 request.

        Args:
            request: JSONRPCRequest object

        Returns:
            JSONRPCResponse with result or error
        """
        try:
            # Validate method exists
            if request.method not in self.methods:
                raise MethodNotFoundError(request.method)

            # Execute method
            handler = self.methods[request.method]
            result = await handler(request.params or {})

            # Return success response
            return JSONRPCResponse.success(request.id, result)

        except ProtocolError as e:
            logger.warning(f"Error handling {request.method}: {e.message}")
            return self._error(request.id, e.code, e.message)
        except Exception as e:
            # Internal error
            logger.error(f"Internal error handling {request.method}: {e}", exc_info=True)
            return self.internal_error(request.id)

    def parse_error(self) -> JSONRPCResponse:
        return self._error(None, ErrorCode.PARSE_ERROR, "Invalid JSON")

    def internal_error(self, id: RequestId = None) -> JSONRPCResponse:
        return self._error(id, ErrorCode.INTERNAL_ERROR, "Internal server error")

    def _error(self, id: RequestId, code: int, message: str) -> JSONRPCResponse:
        if not self.standard_error_codes:
            code = ErrorCode.GENERIC
        return JSONRPCResponse.failure(id, code, message)


def _recover_id(payload: Any) -> RequestId:
    """Best-effort id of a request that failed validation."""
    if not isinstance(payload, dict):
        return None
    request_id = payload.get("id")
    if not isinstance(request_id, (bool, int, float, str)):
        return None
    return request_id

"""MCP stdio transport: newline-delimited JSON-RPC over a stream pair."""
import asyncio
import json
import logging
from typing import TextIO

from .jsonrpc.handler import JSONRPCHandler
from .jsonrpc.models import JSONRPCResponse

logger = logging.getLogger(__name__)


class StdioTransport:
    """Reads one request per line and writes one response per line.

    Requests are handled strictly in order; the next line is not read until
    the previous response has been written and flushed.
    """

    def __init__(self, jsonrpc_handler: JSONRPCHandler, input: TextIO, output: TextIO):
        self.jsonrpc_handler = jsonrpc_handler
        self.input = input
        self.output = output

        # undecodable bytes become U+FFFD and the line fails as invalid JSON
        if hasattr(input, "reconfigure"):
            input.reconfigure(errors="replace")

    async def run(self) -> None:
        """Process lines until end of input."""
        while True:
            try:
                line = await asyncio.to_thread(self.input.readline)
            except UnicodeDecodeError as e:
                logger.warning(f"Undecodable input: {e}")
                self.send(self.jsonrpc_handler.parse_error())
                continue

            if not line:
                logger.info("End of input, stopping")
                return

            line = line.strip()
            if not line:
                continue

            try:
                response = await self.jsonrpc_handler.handle_line(line)
            except Exception as e:
                logger.error(f"Unexpected error: {e}", exc_info=True)
                response = self.jsonrpc_handler.internal_error()

            self.send(response)

    def send(self, response: JSONRPCResponse) -> None:
        """Write a response as a single JSON line and flush."""
        self.output.write(json.dumps(response.to_wire(), separators=(",", ":")) + "\n")
        self.output.flush()

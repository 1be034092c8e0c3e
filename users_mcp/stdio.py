"""
stdio Transport

Newline-delimited JSON-RPC over stdin/stdout. Framing and parsing are done by
the MCP SDK's stdio server; this module only feeds parsed requests to the
adapter and writes the responses back.

Requests are handled strictly one at a time: the next message is not read
until the current response has been sent.
"""

from __future__ import annotations

import logging

from anyio.streams.memory import MemoryObjectReceiveStream, MemoryObjectSendStream
from mcp.server.stdio import stdio_server
from mcp.shared.message import SessionMessage
from mcp.types import JSONRPCMessage

from .adapter import UserRecordsAdapter

logger = logging.getLogger(__name__)


async def serve_session(
    adapter: UserRecordsAdapter,
    read_stream: MemoryObjectReceiveStream[SessionMessage | Exception],
    write_stream: MemoryObjectSendStream[SessionMessage],
) -> None:
    """
    Answer requests from ``read_stream`` until it is closed.

    Notifications and client-side responses get no reply.
    """
    async with read_stream, write_stream:
        async for item in read_stream:
            if isinstance(item, Exception):
                logger.warning("Discarding unparsable message: %s", item)
                continue

            payload = item.message.model_dump(by_alias=True, mode="json", exclude_none=True)
            response = await adapter.handle_payload(payload)
            if response is None:
                continue
            if response.id is None:
                # The SDK refuses error messages without an id.
                logger.warning("Dropping reply without id: %s", response.model_dump())
                continue

            await write_stream.send(
                SessionMessage(JSONRPCMessage.model_validate(response.model_dump(mode="json")))
            )

    logger.info("stdio session closed")


async def run_stdio(adapter: UserRecordsAdapter) -> None:
    """Serve over the process's stdin/stdout until stdin closes."""
    logger.info("Serving %s over stdio", adapter.store.path)
    async with stdio_server() as (read_stream, write_stream):
        await serve_session(adapter, read_stream, write_stream)

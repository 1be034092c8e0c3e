"""
HTTP Transport

An alternative to stdio for clients that cannot spawn the server process.
Each POST to /mcp carries one JSON-RPC message; the reply is the JSON-RPC
response, always with HTTP 200 so errors stay inside the protocol.

The app is built around an adapter passed in by the caller, so one process
can serve any data file without module-level state.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from .adapter import UserRecordsAdapter
from .config import SERVER_NAME, SERVER_VERSION
from .models import ErrorCode, make_error_response

logger = logging.getLogger(__name__)


def create_app(adapter: UserRecordsAdapter) -> FastAPI:
    """Build a FastAPI app answering MCP requests with ``adapter``."""
    app = FastAPI(
        title="Users MCP Server",
        description="Create and read user records through MCP tools and resources.",
        version=SERVER_VERSION,
    )
    app.state.adapter = adapter

    @app.post("/mcp")
    async def mcp_endpoint(request: Request) -> Response:
        """
        Decode the body and hand it to the adapter.

        Notifications are acknowledged with 202 and no body.
        """
        try:
            body = await request.json()
        except ValueError:
            error = make_error_response(None, ErrorCode.PARSE_ERROR, "Invalid JSON")
            return JSONResponse(content=error.model_dump())

        response = await adapter.handle_payload(body)
        if response is None:
            return Response(status_code=202)
        return JSONResponse(content=response.model_dump(mode="json"))

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "healthy", "server": SERVER_NAME, "dataFile": str(adapter.store.path)}

    @app.get("/tools")
    async def list_tools() -> dict[str, Any]:
        """Debug listing; MCP clients use tools/list instead."""
        return {"tools": [t.model_dump(exclude_none=True) for t in adapter.list_tools()]}

    logger.debug("HTTP app built for %s", adapter.store.path)
    return app

"""
User Records MCP Adapter

Exposes the user store as MCP tools and resources. This is the single routing
point shared by every transport.

The adapter:
1. Keeps a registry of tool and resource endpoints
2. Handles MCP JSON-RPC requests and routes them by method
3. Converts store failures into protocol responses so nothing escapes
"""

from __future__ import annotations

import logging
import os
from typing import Any

from pydantic import ValidationError

from .config import DATA_FILE, SUPPORTED_PROTOCOL_VERSIONS
from .endpoints import DEFAULT_RESOURCES, DEFAULT_TOOLS, ResourceEndpoint, ToolEndpoint
from .errors import ContractViolation, RecordStoreFailure, ToolValidationError
from .models import (
    ErrorCode,
    InitializeResult,
    JsonRpcErrorResponse,
    JsonRpcRequest,
    JsonRpcResponse,
    ListResourcesResult,
    ListResourceTemplatesResult,
    ListToolsResult,
    ReadResourceParams,
    ReadResourceResult,
    Resource,
    ResourceTemplate,
    Tool,
    ToolCallParams,
    ToolCallResult,
    make_error_response,
    make_success_response,
)
from .store import UserStore

logger = logging.getLogger(__name__)


class UserRecordsAdapter:
    """
    Adapts the user store to the MCP protocol.

    Requests are handled one at a time by whichever transport owns the
    adapter; the adapter itself keeps no per-request state.
    """

    def __init__(
        self,
        store: UserStore,
        tools: list[ToolEndpoint] | None = None,
        resources: list[ResourceEndpoint] | None = None,
    ):
        self.store = store
        self.tools: dict[str, ToolEndpoint] = {}
        self.resources: list[ResourceEndpoint] = []

        for tool in tools or []:
            self.register_tool(tool)
        for resource in resources or []:
            self.register_resource(resource)

    def register_tool(self, endpoint: ToolEndpoint) -> None:
        """Register an operation as an MCP tool."""
        self.tools[endpoint.name] = endpoint

    def register_resource(self, endpoint: ResourceEndpoint) -> None:
        """Register a resource or resource template."""
        self.resources.append(endpoint)

    def list_tools(self) -> list[Tool]:
        """Return all registered tools in MCP format."""
        return [endpoint.to_mcp_tool() for endpoint in self.tools.values()]

    def list_resources(self) -> list[Resource]:
        return [r.to_mcp_resource() for r in self.resources if not r.is_template]

    def list_resource_templates(self) -> list[ResourceTemplate]:
        return [r.to_mcp_template() for r in self.resources if r.is_template]

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> ToolCallResult:
        """
        Validate arguments and run a tool.

        Validation happens before the handler runs, so a rejected call never
        touches storage.

        Raises:
            ContractViolation: Unknown tool name.
            ToolValidationError: Arguments do not satisfy the input model.
        """
        endpoint = self.tools.get(name)
        if endpoint is None:
            raise ContractViolation(f"Unknown tool: {name}")

        validated = endpoint.validate_arguments(arguments)
        return await endpoint.handler(self.store, validated)

    async def read_resource(self, uri: str) -> ReadResourceResult:
        """
        Resolve ``uri`` against fixed resources first, then templates.

        Raises:
            ContractViolation: No resource matches ``uri``.
            RecordStoreFailure: The backing file could not be read.
        """
        for endpoint in sorted(self.resources, key=lambda r: r.is_template):
            params = endpoint.match(uri)
            if params is not None:
                contents = await endpoint.handler(self.store, uri, params)
                return ReadResourceResult(contents=[contents])

        raise ContractViolation(f"Resource {uri} not found")

    async def handle_payload(
        self, payload: Any
    ) -> JsonRpcResponse | JsonRpcErrorResponse | None:
        """
        Answer one decoded JSON-RPC message, whatever transport it came from.

        Returns None for messages that take no reply: notifications (no id)
        and responses sent back by the client.
        """
        if not isinstance(payload, dict):
            return make_error_response(
                None, ErrorCode.INVALID_REQUEST, "Request must be a JSON object"
            )

        is_notification = "id" not in payload
        is_client_response = "method" not in payload and (
            "result" in payload or "error" in payload
        )
        if is_notification or is_client_response:
            logger.debug("No reply needed for %s", payload.get("method", "client response"))
            return None

        try:
            request = JsonRpcRequest(**payload)
        except ValidationError as e:
            request_id = payload["id"] if isinstance(payload["id"], (int, str)) else None
            return make_error_response(
                request_id, ErrorCode.INVALID_REQUEST, f"Invalid request: {e}"
            )

        return await self.handle_request(request)

    async def handle_request(
        self, request: JsonRpcRequest
    ) -> JsonRpcResponse | JsonRpcErrorResponse:
        """
        Single entry point for all MCP operations.

        Supported methods:
            initialize                → server capabilities
            ping                      → empty result
            tools/list                → available tools
            tools/call                → execute tool
            resources/list            → fixed resources
            resources/templates/list  → parameterized resources
            resources/read            → resource contents

        Never raises: anything a handler lets escape is answered with
        INTERNAL_ERROR so every transport outlives a single bad request.
        """
        logger.debug("Handling %s (id=%r)", request.method, request.id)

        try:
            return await self._route(request)
        except Exception as e:
            logger.exception("Unhandled error in %s", request.method)
            return make_error_response(request.id, ErrorCode.INTERNAL_ERROR, str(e))

    async def _route(
        self, request: JsonRpcRequest
    ) -> JsonRpcResponse | JsonRpcErrorResponse:
        match request.method:
            case "initialize":
                return make_success_response(
                    request.id,
                    self._initialize(request.params).model_dump(),
                )

            case "ping":
                return make_success_response(request.id, {})

            case "tools/list":
                list_result = ListToolsResult(tools=self.list_tools())
                return make_success_response(
                    request.id, list_result.model_dump(exclude_none=True)
                )

            case "tools/call":
                return await self._handle_tools_call(request)

            case "resources/list":
                resources_result = ListResourcesResult(resources=self.list_resources())
                return make_success_response(
                    request.id, resources_result.model_dump(exclude_none=True)
                )

            case "resources/templates/list":
                templates_result = ListResourceTemplatesResult(
                    resourceTemplates=self.list_resource_templates()
                )
                return make_success_response(
                    request.id, templates_result.model_dump(exclude_none=True)
                )

            case "resources/read":
                return await self._handle_resources_read(request)

            case _:
                return make_error_response(
                    request.id,
                    ErrorCode.METHOD_NOT_FOUND,
                    f"Unknown method: {request.method}",
                )

    def _initialize(self, params: dict[str, Any] | None) -> InitializeResult:
        """Echo the client's protocol version when we speak it."""
        requested = (params or {}).get("protocolVersion")
        if requested in SUPPORTED_PROTOCOL_VERSIONS:
            return InitializeResult(protocolVersion=requested)
        if requested is not None:
            logger.info(
                "Client requested unsupported protocol %r; offering %s",
                requested,
                SUPPORTED_PROTOCOL_VERSIONS[0],
            )
        return InitializeResult()

    async def _handle_tools_call(
        self, request: JsonRpcRequest
    ) -> JsonRpcResponse | JsonRpcErrorResponse:
        if request.params is None:
            return make_error_response(
                request.id,
                ErrorCode.INVALID_PARAMS,
                "Missing params for tools/call",
            )

        try:
            params = ToolCallParams(**request.params)
        except ValidationError as e:
            return make_error_response(
                request.id,
                ErrorCode.INVALID_PARAMS,
                f"Invalid params: {e}",
            )

        try:
            call_result = await self.call_tool(params.name, params.arguments)
        except ToolValidationError as e:
            logger.info("Rejected %s call: %s", e.tool_name, e)
            return make_error_response(
                request.id,
                ErrorCode.INVALID_PARAMS,
                str(e),
                data={"tool": e.tool_name, "errors": e.errors},
            )
        except ContractViolation as e:
            return make_error_response(request.id, ErrorCode.INVALID_PARAMS, str(e))

        return make_success_response(request.id, call_result.model_dump(exclude_none=True))

    async def _handle_resources_read(
        self, request: JsonRpcRequest
    ) -> JsonRpcResponse | JsonRpcErrorResponse:
        try:
            params = ReadResourceParams(**(request.params or {}))
        except ValidationError as e:
            return make_error_response(
                request.id,
                ErrorCode.INVALID_PARAMS,
                f"Invalid params: {e}",
            )

        try:
            read_result = await self.read_resource(params.uri)
        except ContractViolation as e:
            return make_error_response(
                request.id, ErrorCode.INVALID_PARAMS, str(e), data={"uri": params.uri}
            )
        except RecordStoreFailure as e:
            logger.warning("Reading %s failed (%s): %s", params.uri, e.failure_category, e)
            return make_error_response(
                request.id,
                ErrorCode.INTERNAL_ERROR,
                str(e),
                data={"uri": params.uri, "failure": e.failure_category},
            )

        return make_success_response(request.id, read_result.model_dump())


# -----------------------------------------------------------------------------
# Factory Functions
# -----------------------------------------------------------------------------


def create_user_records_adapter(
    data_file: str | os.PathLike[str] | None = None,
) -> UserRecordsAdapter:
    """Create an adapter serving the users domain from ``data_file``."""
    return UserRecordsAdapter(
        store=UserStore(data_file if data_file is not None else DATA_FILE),
        tools=DEFAULT_TOOLS,
        resources=DEFAULT_RESOURCES,
    )

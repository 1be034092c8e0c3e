"""
MCP Protocol Models

Pydantic schemas for JSON-RPC 2.0 messages as used by the Model Context Protocol,
plus the user record types persisted by the store.

Reference: https://modelcontextprotocol.io/specification
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from .config import MCP_PROTOCOL_VERSION, SERVER_NAME, SERVER_VERSION


# -----------------------------------------------------------------------------
# User Records
# -----------------------------------------------------------------------------


class CreateUserInput(BaseModel):
    """
    Arguments accepted by the create-user tool.

    Only "is a string" is checked. No email or phone shape validation.
    Unknown keys are dropped rather than rejected.
    """

    model_config = ConfigDict(extra="ignore")

    name: StrictStr
    email: StrictStr
    address: StrictStr
    phone: StrictStr


class UserRecord(BaseModel):
    """
    A persisted user record.

    Keys added to the file by hand are kept so a rewrite does not lose them.
    """

    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    email: str
    address: str
    phone: str


class CreateUserOutput(BaseModel):
    """Structured result of a successful create-user call."""

    userId: int  # noqa: N815


# -----------------------------------------------------------------------------
# JSON-RPC 2.0 Base Types
# -----------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """
    JSON-RPC 2.0 request object.

    MCP uses JSON-RPC as its wire protocol. Every tool invocation
    and resource fetch is wrapped in this format.
    """

    jsonrpc: Literal["2.0"] = "2.0"
    id: int | str
    method: str
    params: dict[str, Any] | None = None


class JsonRpcResponse(BaseModel):
    """JSON-RPC 2.0 success response."""

    jsonrpc: Literal["2.0"] = "2.0"
    id: int | str
    result: Any


class JsonRpcErrorData(BaseModel):
    """Structured error information."""

    code: int
    message: str
    data: Any | None = None


class JsonRpcErrorResponse(BaseModel):
    """JSON-RPC 2.0 error response."""

    jsonrpc: Literal["2.0"] = "2.0"
    id: int | str | None
    error: JsonRpcErrorData


# Standard JSON-RPC error codes
class ErrorCode(int, Enum):
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


# -----------------------------------------------------------------------------
# MCP Tool Types
# -----------------------------------------------------------------------------


class ToolInputSchema(BaseModel):
    """
    JSON Schema describing a tool's input parameters.

    LLM agents use this schema to construct valid tool calls.
    """

    type: Literal["object"] = "object"
    properties: dict[str, dict[str, Any]] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)


class ToolAnnotations(BaseModel):
    """
    Behavioural hints surfaced during capability discovery.

    Advisory only. Nothing in the server reads these back.
    """

    idempotentHint: bool = False  # noqa: N815
    readOnlyHint: bool = False  # noqa: N815
    destructiveHint: bool = True  # noqa: N815
    openWorldHint: bool = True  # noqa: N815


class Tool(BaseModel):
    """MCP Tool definition."""

    name: str
    title: str | None = None
    description: str
    inputSchema: ToolInputSchema  # noqa: N815 (MCP spec uses camelCase)
    outputSchema: dict[str, Any] | None = None  # noqa: N815
    annotations: ToolAnnotations | None = None


class ToolCallParams(BaseModel):
    """Parameters for tools/call method."""

    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)


class TextContent(BaseModel):
    """Text content block."""

    type: Literal["text"] = "text"
    text: str


class ToolCallResult(BaseModel):
    """Result of a tool invocation."""

    content: list[TextContent]
    structuredContent: dict[str, Any] | None = None  # noqa: N815
    isError: bool = False  # noqa: N815


# -----------------------------------------------------------------------------
# MCP Resource Types
# -----------------------------------------------------------------------------


class Resource(BaseModel):
    """A fixed, addressable data view."""

    uri: str
    name: str
    title: str | None = None
    description: str | None = None
    mimeType: str | None = None  # noqa: N815


class ResourceTemplate(BaseModel):
    """A parameterized resource address, e.g. users://{userId}/profile."""

    uriTemplate: str  # noqa: N815
    name: str
    title: str | None = None
    description: str | None = None
    mimeType: str | None = None  # noqa: N815


class ReadResourceParams(BaseModel):
    """Parameters for resources/read method."""

    uri: str


class TextResourceContents(BaseModel):
    """Text body returned for a resource read."""

    uri: str
    mimeType: str  # noqa: N815
    text: str


class ReadResourceResult(BaseModel):
    """Response to resources/read method."""

    contents: list[TextResourceContents]


# -----------------------------------------------------------------------------
# MCP Method Responses
# -----------------------------------------------------------------------------


class ListToolsResult(BaseModel):
    """Response to tools/list method."""

    tools: list[Tool]


class ListResourcesResult(BaseModel):
    """Response to resources/list method."""

    resources: list[Resource]


class ListResourceTemplatesResult(BaseModel):
    """Response to resources/templates/list method."""

    resourceTemplates: list[ResourceTemplate]  # noqa: N815


class InitializeResult(BaseModel):
    """Response to initialize method."""

    protocolVersion: str = MCP_PROTOCOL_VERSION  # noqa: N815
    serverInfo: dict[str, str] = Field(  # noqa: N815
        default_factory=lambda: {"name": SERVER_NAME, "version": SERVER_VERSION}
    )
    capabilities: dict[str, Any] = Field(
        default_factory=lambda: {"tools": {}, "resources": {}}
    )


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------


def make_error_response(
    request_id: int | str | None,
    code: ErrorCode,
    message: str,
    data: Any | None = None,
) -> JsonRpcErrorResponse:
    """Construct a JSON-RPC error response."""
    return JsonRpcErrorResponse(
        id=request_id,
        error=JsonRpcErrorData(code=code.value, message=message, data=data),
    )


def make_success_response(request_id: int | str, result: Any) -> JsonRpcResponse:
    """Construct a JSON-RPC success response."""
    return JsonRpcResponse(id=request_id, result=result)

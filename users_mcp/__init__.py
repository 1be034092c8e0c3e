"""User-records MCP server package."""

from .adapter import UserRecordsAdapter, create_user_records_adapter
from .config import (
    DATA_FILE,
    MCP_PROTOCOL_VERSION,
    SERVER_NAME,
    SERVER_VERSION,
    SUPPORTED_PROTOCOL_VERSIONS,
)
from .endpoints import (
    DEFAULT_RESOURCES,
    DEFAULT_TOOLS,
    ResourceEndpoint,
    ToolEndpoint,
)
from .errors import (
    ConfigurationError,
    ContractViolation,
    RecordStoreFailure,
    StorageUnavailable,
    ToolValidationError,
    WriteFailure,
)
from .models import (
    CreateUserInput,
    CreateUserOutput,
    ErrorCode,
    JsonRpcErrorResponse,
    JsonRpcRequest,
    JsonRpcResponse,
    TextContent,
    Tool,
    ToolAnnotations,
    ToolCallResult,
    UserRecord,
    make_error_response,
    make_success_response,
)
from .store import UserStore

__all__ = [
    # Adapter
    "UserRecordsAdapter",
    "create_user_records_adapter",
    # Store
    "UserStore",
    # Endpoints
    "ToolEndpoint",
    "ResourceEndpoint",
    "DEFAULT_TOOLS",
    "DEFAULT_RESOURCES",
    # Config
    "DATA_FILE",
    "SERVER_NAME",
    "SERVER_VERSION",
    "MCP_PROTOCOL_VERSION",
    "SUPPORTED_PROTOCOL_VERSIONS",
    # Errors
    "RecordStoreFailure",
    "StorageUnavailable",
    "WriteFailure",
    "ContractViolation",
    "ToolValidationError",
    "ConfigurationError",
    # Models
    "UserRecord",
    "CreateUserInput",
    "CreateUserOutput",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "JsonRpcErrorResponse",
    "ErrorCode",
    "Tool",
    "ToolAnnotations",
    "ToolCallResult",
    "TextContent",
    "make_error_response",
    "make_success_response",
]

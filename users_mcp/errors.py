"""
Failure Types

Canonical failure taxonomy for the user-records server.
Every failure raised by the store or the protocol layer is one of these.
"""

from __future__ import annotations


class RecordStoreFailure(Exception):
    """Base class for all failures raised by this package."""

    failure_category: str = "unknown"

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class StorageUnavailable(RecordStoreFailure):
    """
    The backing file is missing, unreadable, or does not hold a user list.

    - Fatality: Non-fatal to the server.
    - MCP Representation: tool result with an error payload, or a JSON-RPC
      INTERNAL_ERROR for resource reads.
    """

    failure_category = "storage_unavailable"


class WriteFailure(RecordStoreFailure):
    """
    The rewritten collection could not be written back to disk.

    The file may be left truncated; nothing is rolled back or retried.
    """

    failure_category = "write_failure"


class ContractViolation(RecordStoreFailure):
    """
    The request violates the tool or resource contract.

    - Fatality: Fatal to the request. Storage is never touched.
    - MCP Representation: JSON-RPC error response with INVALID_PARAMS.
    """

    failure_category = "contract_violation"


class ToolValidationError(ContractViolation):
    """Arguments supplied to a tool did not match its input schema."""

    def __init__(self, tool_name: str, errors: list[str]) -> None:
        super().__init__(f"Invalid arguments for tool '{tool_name}': {'; '.join(errors)}")
        self.tool_name = tool_name
        self.errors = errors


class ConfigurationError(RecordStoreFailure):
    """
    The server was started with options it cannot run with.

    - Fatality: Fatal. The process exits before opening a transport.
    """

    failure_category = "configuration_error"

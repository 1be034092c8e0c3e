"""
Centralized configuration for the user-records MCP server.

All paths, server identity values, and constants in one place.
Supports environment variable overrides for deployment flexibility.
"""

from __future__ import annotations

import os

# -----------------------------------------------------------------------------
# Storage
# -----------------------------------------------------------------------------

DATA_FILE = os.environ.get("USERS_MCP_DATA_FILE", "data/users.json")

# JSON.stringify(users, null, 2) layout
DATA_FILE_INDENT = 2

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------

LOG_LEVEL = os.environ.get("USERS_MCP_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# -----------------------------------------------------------------------------
# HTTP Transport
# -----------------------------------------------------------------------------

HTTP_HOST = os.environ.get("USERS_MCP_HTTP_HOST", "127.0.0.1")
HTTP_PORT = int(os.environ.get("USERS_MCP_HTTP_PORT", "8000"))

# -----------------------------------------------------------------------------
# Server Configuration
# -----------------------------------------------------------------------------

SERVER_NAME = "users-mcp"
SERVER_VERSION = "0.1.0"
MCP_PROTOCOL_VERSION = "2025-06-18"

# Oldest last; the first entry is offered when a client asks for an
# unknown version.
SUPPORTED_PROTOCOL_VERSIONS: tuple[str, ...] = (
    MCP_PROTOCOL_VERSION,
    "2025-03-26",
    "2024-11-05",
)

# -----------------------------------------------------------------------------
# Response Texts
# -----------------------------------------------------------------------------

CREATE_USER_ERROR = "Error creating user"
USER_NOT_FOUND = "User not found"

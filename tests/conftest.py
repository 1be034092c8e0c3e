"""
Shared test fixtures for the user-records MCP server tests.

Provides a throwaway data file per test, plus store and adapter instances
bound to it.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from users_mcp.adapter import UserRecordsAdapter, create_user_records_adapter
from users_mcp.models import JsonRpcRequest
from users_mcp.store import UserStore


# -----------------------------------------------------------------------------
# Test Data
# -----------------------------------------------------------------------------


SAMPLE_USER = {
    "name": "A",
    "email": "a@x.com",
    "address": "1 St",
    "phone": "555",
}

SECOND_USER = {
    "name": "Leanne Graham",
    "email": "Sincere@april.biz",
    "address": "Kulas Light, Gwenborough",
    "phone": "1-770-736-8031",
}


def read_users(path: Path) -> list[dict[str, Any]]:
    """Load the data file the way an external reader would."""
    return json.loads(path.read_text(encoding="utf-8"))


def tool_call(request_id: int, arguments: dict[str, Any], name: str = "create-user") -> JsonRpcRequest:
    return JsonRpcRequest(
        id=request_id,
        method="tools/call",
        params={"name": name, "arguments": arguments},
    )


def resource_read(request_id: int, uri: str) -> JsonRpcRequest:
    return JsonRpcRequest(id=request_id, method="resources/read", params={"uri": uri})


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """An empty user collection on disk."""
    path = tmp_path / "users.json"
    path.write_text("[]", encoding="utf-8")
    return path


@pytest.fixture
def missing_file(tmp_path: Path) -> Path:
    return tmp_path / "nowhere" / "users.json"


@pytest.fixture
def store(data_file: Path) -> UserStore:
    return UserStore(data_file)


@pytest.fixture
def adapter(data_file: Path) -> UserRecordsAdapter:
    return create_user_records_adapter(data_file)

"""
Users Domain

The create-user tool and the two read-only user views.

This domain provides:
- create-user: append a record to the collection
- users://all: the full collection
- users://{userId}/profile: one record by id
"""

from __future__ import annotations

import json
import logging
import re

from ..config import CREATE_USER_ERROR, USER_NOT_FOUND
from ..endpoints import ResourceEndpoint, ToolEndpoint
from ..errors import RecordStoreFailure
from ..models import (
    CreateUserInput,
    CreateUserOutput,
    TextContent,
    TextResourceContents,
    ToolAnnotations,
    ToolCallResult,
)
from ..store import UserStore

logger = logging.getLogger(__name__)

JSON_MIME_TYPE = "application/json"
TEXT_MIME_TYPE = "text/plain"

# Plain ASCII integers; "1_0", " 1" and non-ASCII digits do not match.
_USER_ID = re.compile(r"-?[0-9]+")


def _compact_json(value: object) -> str:
    """Serialize like JSON.stringify: no spaces, non-ASCII kept."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


# -----------------------------------------------------------------------------
# Handlers
# -----------------------------------------------------------------------------


async def create_user(store: UserStore, user: CreateUserInput) -> ToolCallResult:
    """
    Persist a new user and report its id.

    Storage failures are reported in the result, never raised.
    """
    try:
        user_id = await store.append_and_persist(user)
    except RecordStoreFailure as e:
        logger.warning("create-user failed (%s): %s", e.failure_category, e)
        return ToolCallResult(
            content=[TextContent(text=f"{CREATE_USER_ERROR}: {e}")],
            structuredContent={"error": CREATE_USER_ERROR},
        )

    output = CreateUserOutput(userId=user_id)
    return ToolCallResult(
        content=[TextContent(text=output.model_dump_json())],
        structuredContent=output.model_dump(),
    )


async def list_users(store: UserStore, uri: str, params: dict[str, str]) -> TextResourceContents:
    records = await store.load_all()
    return TextResourceContents(
        uri=uri,
        mimeType=JSON_MIME_TYPE,
        text=_compact_json([record.model_dump() for record in records]),
    )


async def get_user_profile(
    store: UserStore, uri: str, params: dict[str, str]
) -> TextResourceContents:
    """Look up one user. A missing user is a normal plain-text answer."""
    raw_id = params["userId"]
    record = None
    if _USER_ID.fullmatch(raw_id):
        record = await store.find_by_id(int(raw_id))

    if record is None:
        return TextResourceContents(uri=uri, mimeType=TEXT_MIME_TYPE, text=USER_NOT_FOUND)

    return TextResourceContents(
        uri=uri,
        mimeType=JSON_MIME_TYPE,
        text=_compact_json(record.model_dump()),
    )


# -----------------------------------------------------------------------------
# Endpoint Definitions
# -----------------------------------------------------------------------------


USER_TOOLS: list[ToolEndpoint] = [
    ToolEndpoint(
        name="create-user",
        title="Create User",
        description="Create a new user in the database",
        input_model=CreateUserInput,
        output_model=CreateUserOutput,
        handler=create_user,
        annotations=ToolAnnotations(
            idempotentHint=False,
            readOnlyHint=False,
            destructiveHint=False,
            openWorldHint=True,
        ),
    ),
]

USER_RESOURCES: list[ResourceEndpoint] = [
    ResourceEndpoint(
        uri="users://all",
        name="users",
        title="Users",
        description="Get all users data from the database",
        mime_type=JSON_MIME_TYPE,
        handler=list_users,
    ),
    ResourceEndpoint(
        uri="users://{userId}/profile",
        name="user-details",
        title="User Details",
        description="Get a user's details from the database",
        mime_type=JSON_MIME_TYPE,
        handler=get_user_profile,
    ),
]

"""
User Record Store

A flat JSON file is the whole state of the system. Every operation reads the
full file; every mutation rewrites it. Nothing is cached between calls.

Identifiers are assigned as ``len(records) + 1``. If records are removed from
the file by hand, the next create can reuse an id that is still present.
"""

from __future__ import annotations

import json
import logging
import os

import anyio
from pydantic import TypeAdapter, ValidationError

from .config import DATA_FILE, DATA_FILE_INDENT
from .errors import StorageUnavailable, WriteFailure
from .models import CreateUserInput, UserRecord

logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(list[UserRecord])


class UserStore:
    """
    Read/modify/write access to the user collection file.

    Creates are serialized by a single in-process lock, so two overlapping
    create calls in the same process cannot both read the same snapshot.
    Separate processes writing the same file still race; the last write wins.
    """

    def __init__(self, path: str | os.PathLike[str] = DATA_FILE) -> None:
        self.path = anyio.Path(path)
        self._lock: anyio.Lock | None = None

    @property
    def write_lock(self) -> anyio.Lock:
        """Lazily create the lock inside the running event loop."""
        if self._lock is None:
            self._lock = anyio.Lock()
        return self._lock

    async def load_all(self) -> list[UserRecord]:
        """
        Read the entire collection from disk.

        Raises:
            StorageUnavailable: If the file is missing, unreadable, not JSON,
                or not an array of user records.
        """
        try:
            raw = await self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageUnavailable(f"Cannot read {self.path}: {e}", cause=e) from e
        except UnicodeDecodeError as e:
            raise StorageUnavailable(f"{self.path} is not valid UTF-8: {e}", cause=e) from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageUnavailable(f"{self.path} is not valid JSON: {e}", cause=e) from e

        if not isinstance(data, list):
            raise StorageUnavailable(
                f"{self.path} must contain a JSON array, got {type(data).__name__}"
            )

        try:
            records = _RECORDS.validate_python(data)
        except ValidationError as e:
            raise StorageUnavailable(
                f"{self.path} contains invalid user records: {e}", cause=e
            ) from e

        logger.debug("Loaded %d users from %s", len(records), self.path)
        return records

    async def append_and_persist(self, candidate: CreateUserInput) -> int:
        """
        Append a new user and rewrite the whole file.

        Returns:
            The id assigned to the new record (current record count + 1).

        Raises:
            StorageUnavailable: If the existing collection cannot be loaded.
            WriteFailure: If the rewritten collection cannot be saved.
        """
        async with self.write_lock:
            records = await self.load_all()
            user_id = len(records) + 1
            records.append(UserRecord(id=user_id, **candidate.model_dump()))
            await self._persist(records)

        logger.info("Created user %d in %s", user_id, self.path)
        return user_id

    async def find_by_id(self, user_id: int) -> UserRecord | None:
        """Return the first record with a matching id, or None."""
        for record in await self.load_all():
            if record.id == user_id:
                return record
        return None

    async def _persist(self, records: list[UserRecord]) -> None:
        text = json.dumps(
            [record.model_dump() for record in records],
            indent=DATA_FILE_INDENT,
            ensure_ascii=False,
        )
        # Encode before opening: opening for write truncates the file.
        try:
            data = text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise WriteFailure(f"Cannot encode users for {self.path}: {e}", cause=e) from e

        try:
            await self.path.write_bytes(data)
        except OSError as e:
            raise WriteFailure(f"Cannot write {self.path}: {e}", cause=e) from e

"""Storage-less DAO with unsupported mutations."""
from __future__ import annotations

from typing import Any

from funcdao.dao.base import Dao, find_entry
from funcdao.exceptions import NotFoundError, UnsupportedError
from funcdao.models import ID, TYPE, Entry


class BasicDao(Dao[ID, TYPE]):
    """A DAO with no backing store.

    Lists nothing, derives ``get`` from ``get_all`` and rejects every
    mutation with ``UnsupportedError``. Subclasses override only the
    operations they support.
    """

    async def get_all(self) -> list[Entry[ID, TYPE]]:
        return []

    async def get(self, id: ID) -> TYPE:
        found = find_entry(await self.get_all(), id, self.equal_id)
        if found is None:
            raise NotFoundError(f"No such value exists: {id!r}")
        return found.value

    async def create(self, value: TYPE) -> ID:
        raise UnsupportedError("Create not supported")

    async def update(self, id: ID, value: TYPE, target: TYPE | None = None) -> None:
        raise UnsupportedError("Update not supported")

    async def patch(self, id: ID, value: Any, target: TYPE | None = None) -> None:
        raise UnsupportedError("Patch not supported")

    async def remove(self, id: ID, target: TYPE | None = None) -> None:
        raise UnsupportedError("Remove not supported")

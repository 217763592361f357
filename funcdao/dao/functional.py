"""DAO built from injected backend functions."""
from __future__ import annotations

import logging
from typing import Any

from funcdao.config import (
    CreateFunction,
    FunctionalDaoOptions,
    GetAllFunction,
    PatchFunction,
    RemoveFunction,
    UpdateFunction,
)
from funcdao.dao.base import Dao, find_entry
from funcdao.dao.basic import BasicDao
from funcdao.equality import Equality, EqualityPolicy
from funcdao.exceptions import NotFoundError
from funcdao.models import ID, TYPE, Entry

logger = logging.getLogger(__name__)


class FunctionalDao(Dao[ID, TYPE]):
    """A DAO whose operations are supplied as functions.

    Operations without a supplied function behave exactly like
    ``BasicDao``. ``update``, ``patch`` and ``remove`` check existence with
    ``get`` before delegating, so a supplied function is only ever called
    for an identifier that resolves, and an absent identifier always fails
    with ``NotFoundError``.

    The check and the delegate call are two separate awaits; a concurrent
    removal in between is not guarded against.
    """

    def __init__(
        self,
        options: FunctionalDaoOptions | None = None,
        *,
        policy: EqualityPolicy | None = None,
        equal_id: Equality | None = None,
        equal_value: Equality | None = None,
        get_all: GetAllFunction | None = None,
        create: CreateFunction | None = None,
        update: UpdateFunction | None = None,
        patch: PatchFunction | None = None,
        remove: RemoveFunction | None = None,
    ) -> None:
        """Create a functional DAO.

        Args:
            options: Operation slots. Mutually exclusive with the
                ``get_all``/``create``/``update``/``patch``/``remove``
                keyword arguments.
            policy: Equality policy. Mutually exclusive with
                ``equal_id``/``equal_value``.
            equal_id: Identifier equality, strict by default.
            equal_value: Value equality, strict by default.

        Raises:
            TypeError: If both an options object and slot keywords, or both
                a policy and equality keywords, are given.
        """
        slots = FunctionalDaoOptions(
            get_all=get_all, create=create, update=update, patch=patch, remove=remove
        )
        if options is not None and slots.supplied():
            raise TypeError("Pass either options or operation functions, not both")
        if policy is not None and (equal_id is not None or equal_value is not None):
            raise TypeError("Pass either a policy or equality functions, not both")
        if policy is None:
            policy = EqualityPolicy(equal_id=equal_id, equal_value=equal_value)
        super().__init__(policy)
        self._options = options if options is not None else slots
        self._fallback: BasicDao[ID, TYPE] = BasicDao(policy)

    @property
    def options(self) -> FunctionalDaoOptions:
        return self._options

    async def get_all(self) -> list[Entry[ID, TYPE]]:
        if self._options.get_all is None:
            return await self._fallback.get_all()
        return [Entry.coerce(raw) for raw in await self._options.get_all()]

    async def get(self, id: ID) -> TYPE:
        found = find_entry(await self.get_all(), id, self.equal_id)
        if found is None:
            raise NotFoundError(f"No such value exists: {id!r}")
        return found.value

    async def create(self, value: TYPE) -> ID:
        if self._options.create is None:
            logger.debug("create not supplied, falling back")
            return await self._fallback.create(value)
        return await self._options.create(value)

    async def update(self, id: ID, value: TYPE, target: TYPE | None = None) -> None:
        if self._options.update is None:
            logger.debug("update not supplied, falling back")
            return await self._fallback.update(id, value, target)
        found = await self._existing(id, "update")
        await self._options.update(id, value, found if target is None else target)

    async def patch(self, id: ID, value: Any, target: TYPE | None = None) -> None:
        if self._options.patch is None:
            logger.debug("patch not supplied, falling back")
            return await self._fallback.patch(id, value, target)
        found = await self._existing(id, "patch")
        await self._options.patch(id, value, found if target is None else target)

    async def remove(self, id: ID, target: TYPE | None = None) -> None:
        if self._options.remove is None:
            logger.debug("remove not supplied, falling back")
            return await self._fallback.remove(id, target)
        found = await self._existing(id, "remove")
        await self._options.remove(id, found if target is None else target)

    async def _existing(self, id: ID, action: str) -> TYPE:
        """Resolve ``id`` before ``action``, raising a fresh NotFoundError if absent."""
        try:
            found = await self.get(id)
        except NotFoundError as exc:
            raise NotFoundError(f"Cannot {action} non-existing value", cause=exc) from exc
        logger.debug("%s delegated for id %r", action, id)
        return found

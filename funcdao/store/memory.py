"""In-memory backend functions for a functional DAO."""
from __future__ import annotations

import dataclasses
import logging
import secrets
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from funcdao.config import FunctionalDaoOptions
from funcdao.dao.base import find_entry
from funcdao.equality import Equality
from funcdao.exceptions import InvalidValueError, NotFoundError
from funcdao.models import Entry

logger = logging.getLogger(__name__)

Validator = Callable[[Any], bool]
IdFactory = Callable[[], Any]


def string_record_validator(value: Any) -> bool:
    """Accept mappings whose keys and values are all strings."""
    return isinstance(value, Mapping) and all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    )


def merge_patch(target: Any, partial: Any) -> Any:
    """Merge the fields of ``partial`` over ``target`` without mutating either.

    Mappings merge into a new dict; dataclass instances are copied with
    ``dataclasses.replace``.

    Raises:
        InvalidValueError: If the values cannot be merged.
    """
    if not isinstance(partial, Mapping):
        raise InvalidValueError(f"Patch must be a mapping, got {type(partial).__name__}")
    if isinstance(target, Mapping):
        return {**target, **partial}
    if dataclasses.is_dataclass(target) and not isinstance(target, type):
        try:
            return dataclasses.replace(target, **partial)
        except TypeError as exc:
            raise InvalidValueError(f"Invalid patch fields: {sorted(partial)}", cause=exc)
    raise InvalidValueError(f"Cannot patch a value of type {type(target).__name__}")


class MemoryStore:
    """Stores values in a dict and exposes them as DAO backend functions.

    Identifiers handed out by ``create`` are never reused, even after the
    value is removed, so the reserved set grows without bound for the
    lifetime of the store.

    Stored keys are looked up with ``equal_id`` when one is given, so the
    store agrees with a DAO using the same identifier equality.
    """

    def __init__(
        self,
        entries: Mapping[Any, Any] | Iterable[tuple[Any, Any]] | None = None,
        *,
        validator: Validator | None = None,
        id_factory: IdFactory | None = None,
        equal_id: Equality | None = None,
    ) -> None:
        self._entries: dict[Any, Any] = dict(entries or {})
        self._reserved: set[Any] = set(self._entries)
        self._validator = validator
        self._id_factory = id_factory or (lambda: secrets.token_hex(8))
        self._equal_id = equal_id

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, id: Any) -> bool:
        return self._key(id) is not None

    def snapshot(self) -> dict[Any, Any]:
        """Copy of the stored identifier/value mapping."""
        return dict(self._entries)

    def options(self) -> FunctionalDaoOptions:
        """Operation slots wired to this store."""
        return FunctionalDaoOptions(
            get_all=self.get_all,
            create=self.create,
            update=self.update,
            patch=self.patch,
            remove=self.remove,
        )

    def _validate(self, value: Any) -> None:
        if self._validator is not None and not self._validator(value):
            raise InvalidValueError("Invalid value")

    def _key(self, id: Any) -> Any | None:
        """Stored key matching ``id``, or None."""
        if self._equal_id is None:
            return id if id in self._entries else None
        keys = (Entry(id=key, value=None) for key in self._entries)
        found = find_entry(keys, id, self._equal_id)
        return None if found is None else found.id

    def _require(self, id: Any) -> Any:
        key = self._key(id)
        if key is None:
            raise NotFoundError(f"No value for key {id!r}")
        return key

    def _new_id(self) -> Any:
        id = self._id_factory()
        while id in self._reserved:
            id = self._id_factory()
        self._reserved.add(id)
        return id

    async def get_all(self) -> list[Entry]:
        return [Entry(id=id, value=value) for id, value in self._entries.items()]

    async def create(self, value: Any) -> Any:
        self._validate(value)
        id = self._new_id()
        self._entries[id] = value
        logger.debug("created entry %r", id)
        return id

    async def update(self, id: Any, value: Any, target: Any = None) -> None:
        self._validate(value)
        key = self._require(id)
        self._entries[key] = value

    async def patch(self, id: Any, value: Any, target: Any = None) -> None:
        key = self._require(id)
        merged = merge_patch(self._entries[key] if target is None else target, value)
        self._validate(merged)
        self._entries[key] = merged

    async def remove(self, id: Any, target: Any = None) -> None:
        key = self._require(id)
        del self._entries[key]
        logger.debug("removed entry %r", key)

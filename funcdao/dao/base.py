"""Abstract base class for data access objects."""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, Generic

from funcdao.equality import Equality, EqualityPolicy
from funcdao.models import ID, TYPE, Entry


def find_entry(
    entries: Iterable[Entry], id: Any, equal_id: Equality
) -> Entry | None:
    """Return the first entry whose identifier equals ``id``, or None."""
    for entry in entries:
        if equal_id(entry.id, id):
            return entry
    return None


class Dao(ABC, Generic[ID, TYPE]):
    """Abstract interface for identifier-keyed value access.

    All operations are coroutines. Failures are raised as
    ``NotFoundError``, ``UnsupportedError`` or ``InvalidValueError``.
    """

    def __init__(self, policy: EqualityPolicy | None = None) -> None:
        self._policy = policy if policy is not None else EqualityPolicy()

    @property
    def policy(self) -> EqualityPolicy:
        return self._policy

    def equal_id(self, compared: ID, comparee: ID) -> bool:
        return self._policy.equal_id(compared, comparee)

    def equal_value(self, compared: TYPE, comparee: TYPE) -> bool:
        return self._policy.equal_value(compared, comparee)

    @abstractmethod
    async def get(self, id: ID) -> TYPE:
        """Get the value of an identifier. Raises NotFoundError if absent."""

    @abstractmethod
    async def get_all(self) -> list[Entry[ID, TYPE]]:
        """List all stored entries. Returns an empty list if none exist."""

    @abstractmethod
    async def create(self, value: TYPE) -> ID:
        """Store a new value and return the identifier assigned to it."""

    @abstractmethod
    async def update(self, id: ID, value: TYPE, target: TYPE | None = None) -> None:
        """Replace the value of an existing identifier.

        ``target`` is an optional hint of the value before the update.
        """

    @abstractmethod
    async def patch(self, id: ID, value: Any, target: TYPE | None = None) -> None:
        """Merge some fields over the value of an existing identifier."""

    @abstractmethod
    async def remove(self, id: ID, target: TYPE | None = None) -> None:
        """Remove the value of an existing identifier."""

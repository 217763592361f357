"""Pre-configured DAO factories."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from funcdao.dao.functional import FunctionalDao
from funcdao.equality import EqualityPolicy
from funcdao.store.memory import IdFactory, MemoryStore, Validator


def create_memory_dao(
    entries: Mapping[Any, Any] | Iterable[tuple[Any, Any]] | None = None,
    *,
    validator: Validator | None = None,
    id_factory: IdFactory | None = None,
    policy: EqualityPolicy | None = None,
) -> FunctionalDao:
    """Create a FunctionalDao backed by a new MemoryStore.

    Args:
        entries: Initial identifier/value pairs.
        validator: Predicate values must satisfy on create, update and patch.
        id_factory: Identifier generator for ``create``; random hex by default.
        policy: Equality policy, strict by default. The store resolves
            identifiers with the same ``equal_id``.
    """
    store = MemoryStore(
        entries,
        validator=validator,
        id_factory=id_factory,
        equal_id=None if policy is None else policy.equal_id,
    )
    return FunctionalDao(store.options(), policy=policy)

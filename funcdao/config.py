"""DAO configuration and equality presets."""
from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, fields
from typing import Any

from funcdao.equality import (
    EqualityPolicy,
    casefold_equality,
    identity_equality,
)

# Signatures of the functions a storage backend may inject
GetAllFunction = Callable[[], Awaitable[Iterable[Any]]]
CreateFunction = Callable[[Any], Awaitable[Any]]
UpdateFunction = Callable[[Any, Any, Any], Awaitable[None]]
PatchFunction = Callable[[Any, Any, Any], Awaitable[None]]
RemoveFunction = Callable[[Any, Any], Awaitable[None]]


@dataclass(frozen=True)
class FunctionalDaoOptions:
    """Operation slots of a functional DAO.

    Each slot holds the backend function for that operation, or ``None`` to
    fall back to the basic DAO behavior.
    """

    get_all: GetAllFunction | None = None
    create: CreateFunction | None = None
    update: UpdateFunction | None = None
    patch: PatchFunction | None = None
    remove: RemoveFunction | None = None

    def supplied(self) -> list[str]:
        """Names of the slots holding a function."""
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]


# Preset equality policies
EQUALITY_POLICIES: dict[str, EqualityPolicy] = {
    "strict": EqualityPolicy(),
    "identity": EqualityPolicy(
        equal_id=identity_equality,
        equal_value=identity_equality,
    ),
    # Case-insensitive string identifiers, strict values
    "casefold": EqualityPolicy(equal_id=casefold_equality),
}

_DEFAULT_POLICY = EQUALITY_POLICIES["strict"]


def get_policy(name: str | None) -> EqualityPolicy:
    """Get an equality policy by name.

    Args:
        name: Preset name ("strict", "identity", "casefold")
              or None for default.

    Returns:
        The requested EqualityPolicy, or the strict policy if name not found.
    """
    if name is None:
        return _DEFAULT_POLICY
    return EQUALITY_POLICIES.get(name, _DEFAULT_POLICY)

"""Equality functions for identifiers and values."""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

Equality = Callable[[Any, Any], bool]


def strict_equality(compared: Any, comparee: Any) -> bool:
    """Default equality: plain ``==``."""
    return compared == comparee


def identity_equality(compared: Any, comparee: Any) -> bool:
    return compared is comparee


def casefold_equality(compared: Any, comparee: Any) -> bool:
    """Case-insensitive equality for strings, ``==`` for anything else."""
    if isinstance(compared, str) and isinstance(comparee, str):
        return compared.casefold() == comparee.casefold()
    return compared == comparee


@dataclass(frozen=True)
class EqualityPolicy:
    """Equality functions a DAO uses for identifiers and values.

    Passing ``None`` for either function selects ``strict_equality``.
    """

    equal_id: Equality = strict_equality
    equal_value: Equality = strict_equality

    def __post_init__(self) -> None:
        if self.equal_id is None:
            object.__setattr__(self, "equal_id", strict_equality)
        if self.equal_value is None:
            object.__setattr__(self, "equal_value", strict_equality)

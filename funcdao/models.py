"""Data models for DAO listings."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

ID = TypeVar("ID")
TYPE = TypeVar("TYPE")


@dataclass(frozen=True)
class Entry(Generic[ID, TYPE]):
    """A single identifier/value pair of a listing."""

    id: ID
    value: TYPE

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "value": self.value}

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Entry":
        return cls(id=d["id"], value=d["value"])

    @classmethod
    def coerce(cls, raw: Any) -> "Entry":
        """Build an entry from an ``Entry``, an ``(id, value)`` pair or a mapping.

        Raises:
            TypeError: If ``raw`` has none of the accepted shapes.
        """
        if isinstance(raw, Entry):
            return raw
        if isinstance(raw, Mapping):
            return cls.from_dict(raw)
        if isinstance(raw, tuple) and len(raw) == 2:
            return cls(id=raw[0], value=raw[1])
        raise TypeError(f"Cannot build an entry from {type(raw).__name__}")

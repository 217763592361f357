"""Tests for funcdao.store.memory."""
from dataclasses import dataclass

import pytest

from funcdao.exceptions import InvalidValueError, NotFoundError
from funcdao.models import Entry
from funcdao.store.memory import MemoryStore, merge_patch, string_record_validator


@dataclass
class Point:
    x: int
    y: int


class TestStringRecordValidator:
    def test_accepts_string_record(self):
        assert string_record_validator({"bar": "barbar"}) is True

    def test_accepts_empty_record(self):
        assert string_record_validator({}) is True

    def test_rejects_non_string_value(self):
        assert string_record_validator({"bad": 1}) is False

    def test_rejects_non_mapping(self):
        assert string_record_validator("bar") is False


class TestMergePatch:
    def test_merges_mapping(self):
        assert merge_patch({"a": 1, "b": 2}, {"b": 3}) == {"a": 1, "b": 3}

    def test_does_not_mutate_target(self):
        target = {"a": 1}
        merge_patch(target, {"a": 2})
        assert target == {"a": 1}

    def test_merges_dataclass(self):
        assert merge_patch(Point(1, 2), {"y": 3}) == Point(1, 3)

    def test_unknown_dataclass_field(self):
        with pytest.raises(InvalidValueError):
            merge_patch(Point(1, 2), {"z": 3})

    def test_non_mapping_patch(self):
        with pytest.raises(InvalidValueError):
            merge_patch({"a": 1}, "b")

    def test_unpatchable_target(self):
        with pytest.raises(InvalidValueError):
            merge_patch("text", {"a": 1})


class TestMemoryStore:
    async def test_get_all_lists_seed(self, store, seed):
        entries = await store.get_all()
        assert entries == [Entry(id, value) for id, value in seed.items()]

    async def test_create_assigns_fresh_id(self, store):
        id = await store.create({"baz": "qux"})
        assert id not in ("Foo", "Bar", "Barbar")
        assert store.snapshot()[id] == {"baz": "qux"}

    async def test_create_invalid(self, store):
        with pytest.raises(InvalidValueError):
            await store.create({"bad": 1})
        assert len(store) == 3

    async def test_create_skips_reserved_ids(self):
        ids = iter(["Foo", "Foo", "new"])
        store = MemoryStore({"Foo": 1}, id_factory=lambda: next(ids))
        assert await store.create(2) == "new"

    async def test_removed_id_not_reused(self):
        ids = iter(["a", "a", "b"])
        store = MemoryStore(id_factory=lambda: next(ids))
        assert await store.create(1) == "a"
        await store.remove("a")
        assert await store.create(2) == "b"

    async def test_update_replaces(self, store):
        await store.update("Foo", {"baz": "qux"})
        assert store.snapshot()["Foo"] == {"baz": "qux"}

    async def test_update_missing(self, store):
        with pytest.raises(NotFoundError):
            await store.update("Baz", {"a": "b"})

    async def test_patch_merges_stored_value(self, store):
        await store.patch("Barbar", {"bar": "baz"})
        assert store.snapshot()["Barbar"] == {"foo": "bar", "bar": "baz"}

    async def test_patch_merges_over_target(self, store):
        await store.patch("Foo", {"b": "2"}, {"a": "1"})
        assert store.snapshot()["Foo"] == {"a": "1", "b": "2"}

    async def test_patch_invalid(self, store):
        with pytest.raises(InvalidValueError):
            await store.patch("Foo", {"bar": 1})
        assert store.snapshot()["Foo"] == {"bar": "barbar"}

    async def test_remove(self, store):
        await store.remove("Foo")
        assert "Foo" not in store

    async def test_remove_missing(self, store):
        with pytest.raises(NotFoundError):
            await store.remove("Baz")

    def test_options_wires_all_slots(self, store):
        assert store.options().supplied() == [
            "get_all", "create", "update", "patch", "remove",
        ]

    async def test_equal_id_resolves_stored_key(self):
        from funcdao.equality import casefold_equality

        store = MemoryStore({"Foo": {"a": "1"}}, equal_id=casefold_equality)
        assert "FOO" in store
        await store.patch("foo", {"b": "2"})
        assert store.snapshot() == {"Foo": {"a": "1", "b": "2"}}
        await store.remove("FOO")
        assert len(store) == 0

    async def test_without_equal_id_lookup_is_exact(self, store):
        assert "foo" not in store
        with pytest.raises(NotFoundError):
            await store.remove("foo")

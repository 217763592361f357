"""Shared fixtures for funcdao tests."""
import pytest

from funcdao.store.memory import MemoryStore, string_record_validator


def _seed():
    return {
        "Foo": {"bar": "barbar"},
        "Bar": {"foo": "foobar"},
        "Barbar": {"foo": "bar", "bar": "foo"},
    }


@pytest.fixture
def seed():
    return _seed()


@pytest.fixture
def store():
    return MemoryStore(_seed(), validator=string_record_validator)

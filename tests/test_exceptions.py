"""Tests for funcdao.exceptions."""
import pytest

from funcdao.exceptions import (
    DaoError,
    InvalidValueError,
    NotFoundError,
    UnsupportedError,
)


class TestDaoError:
    def test_message_without_cause(self):
        err = DaoError("boom")
        assert str(err) == "boom"
        assert err.message == "boom"
        assert err.cause is None
        assert err.__cause__ is None

    def test_cause_is_chained(self):
        cause = KeyError("Foo")
        err = NotFoundError("missing", cause=cause)
        assert err.cause is cause
        assert err.__cause__ is cause

    @pytest.mark.parametrize(
        "cls, builtin",
        [
            (NotFoundError, LookupError),
            (UnsupportedError, NotImplementedError),
            (InvalidValueError, ValueError),
        ],
    )
    def test_kinds_extend_builtins(self, cls, builtin):
        assert issubclass(cls, DaoError)
        assert issubclass(cls, builtin)

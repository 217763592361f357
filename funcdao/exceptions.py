"""Exceptions raised by DAO operations."""
from __future__ import annotations


class DaoError(Exception):
    """Base error of DAO operations, with an optional underlying cause."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class NotFoundError(DaoError, LookupError):
    """The requested identifier has no stored value."""


class UnsupportedError(DaoError, NotImplementedError):
    """The operation is not available in this DAO configuration."""


class InvalidValueError(DaoError, ValueError):
    """A value or partial value failed backend validation."""

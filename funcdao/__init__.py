"""funcdao: asynchronous data access objects over injected storage functions."""
from funcdao.config import EQUALITY_POLICIES, FunctionalDaoOptions, get_policy
from funcdao.dao.base import Dao
from funcdao.dao.basic import BasicDao
from funcdao.dao.functional import FunctionalDao
from funcdao.defaults import create_memory_dao
from funcdao.equality import (
    Equality,
    EqualityPolicy,
    identity_equality,
    strict_equality,
)
from funcdao.exceptions import (
    DaoError,
    InvalidValueError,
    NotFoundError,
    UnsupportedError,
)
from funcdao.models import Entry
from funcdao.store.memory import MemoryStore, merge_patch, string_record_validator

__all__ = [
    # Models
    "Entry",
    # Equality
    "Equality",
    "EqualityPolicy",
    "strict_equality",
    "identity_equality",
    # Configuration
    "FunctionalDaoOptions",
    "EQUALITY_POLICIES",
    "get_policy",
    # Errors
    "DaoError",
    "NotFoundError",
    "UnsupportedError",
    "InvalidValueError",
    # DAOs
    "Dao",
    "BasicDao",
    "FunctionalDao",
    # Storage
    "MemoryStore",
    "merge_patch",
    "string_record_validator",
    # Defaults
    "create_memory_dao",
]

"""SQL repository implementations."""

from baz.persistence.repository.baz import SqlBazRepository

__all__ = [
    "SqlBazRepository",
]

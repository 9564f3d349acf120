"""Domain value objects."""

from baz.domain.value.identifiers import MAX_BAZ_ID, BazId

__all__ = [
    "BazId",
    "MAX_BAZ_ID",
]

"""Repository interfaces.

Interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from baz.domain.repository.base import EntityRepository, validate_range
from baz.domain.repository.baz import BazRepository

__all__ = [
    "BazRepository",
    "EntityRepository",
    "validate_range",
]

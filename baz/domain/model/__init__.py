"""Domain model entities."""

from baz.domain.model.baz import Baz
from baz.domain.model.common import DomainModel, Entity

__all__ = [
    "Baz",
    "DomainModel",
    "Entity",
]

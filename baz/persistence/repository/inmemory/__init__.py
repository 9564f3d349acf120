"""In-memory repository implementations for testing."""

from .baz import InMemoryBazRepository
from .facade import InMemoryFacade

__all__ = [
    "InMemoryBazRepository",
    "InMemoryFacade",
]

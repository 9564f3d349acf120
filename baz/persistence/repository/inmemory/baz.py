"""In-memory implementation of Baz repository for testing."""

from baz.domain.model.baz import Baz
from baz.domain.repository.baz import BazRepository
from baz.persistence.repository.inmemory.facade import InMemoryFacade


class InMemoryBazRepository(InMemoryFacade[Baz], BazRepository):
    """In-memory implementation of BazRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        super().__init__(Baz)

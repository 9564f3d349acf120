"""Mock persistence providers for testing."""

from dishka import Scope, provide

from baz.domain.repository import BazRepository
from baz.persistence.repository.inmemory import InMemoryBazRepository
from baz.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across requests of one container. Each
    test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_baz_repository(self) -> BazRepository:
        """Provide in-memory Baz repository."""
        return InMemoryBazRepository()

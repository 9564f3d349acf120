"""Domain layer DI providers."""

from dishka import Scope, provide

from baz.domain.repository import BazRepository
from baz.domain.service import BazService
from baz.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with the repository/session
    lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_baz_service(self, baz_repository: BazRepository) -> BazService:
        """Provide Baz domain service."""
        return BazService(baz_repository=baz_repository)

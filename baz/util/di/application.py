"""Application layer DI providers."""

from dishka import Scope, provide

from baz.application.usecase.baz import (
    CountBazUseCase,
    CreateBazUseCase,
    DeleteBazUseCase,
    GetBazUseCase,
    ListBazUseCase,
    UpdateBazUseCase,
)
from baz.domain.service import BazService
from baz.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_create_baz_use_case(self, baz_service: BazService) -> CreateBazUseCase:
        """Provide create Baz use case."""
        return CreateBazUseCase(baz_service=baz_service)

    @provide(scope=Scope.REQUEST)
    def get_get_baz_use_case(self, baz_service: BazService) -> GetBazUseCase:
        """Provide get Baz use case."""
        return GetBazUseCase(baz_service=baz_service)

    @provide(scope=Scope.REQUEST)
    def get_update_baz_use_case(self, baz_service: BazService) -> UpdateBazUseCase:
        """Provide update Baz use case."""
        return UpdateBazUseCase(baz_service=baz_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_baz_use_case(self, baz_service: BazService) -> DeleteBazUseCase:
        """Provide delete Baz use case."""
        return DeleteBazUseCase(baz_service=baz_service)

    @provide(scope=Scope.REQUEST)
    def get_list_baz_use_case(self, baz_service: BazService) -> ListBazUseCase:
        """Provide list Baz use case."""
        return ListBazUseCase(baz_service=baz_service)

    @provide(scope=Scope.REQUEST)
    def get_count_baz_use_case(self, baz_service: BazService) -> CountBazUseCase:
        """Provide count Baz use case."""
        return CountBazUseCase(baz_service=baz_service)

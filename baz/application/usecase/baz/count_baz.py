"""Count Baz use case."""

from pydantic import BaseModel

from baz.application.usecase.base import BaseUseCase
from baz.domain.service import BazService


class CountBazResponse(BaseModel):
    """Count Baz response."""

    count: int


class CountBazUseCase(BaseUseCase[None, CountBazResponse]):
    """Use case for counting stored Baz."""

    def __init__(self, baz_service: BazService) -> None:
        self.baz_service = baz_service

    async def execute(self, request: None = None) -> CountBazResponse:
        return CountBazResponse(count=await self.baz_service.count_baz())

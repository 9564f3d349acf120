"""Create Baz use case."""

import logfire
from pydantic import BaseModel

from baz.application.usecase.base import BaseUseCase
from baz.domain.service import BazService


class CreateBazRequest(BaseModel):
    """Create Baz request."""

    payload: str | None = None


class CreateBazResponse(BaseModel):
    """Create Baz response."""

    id: int
    payload: str | None


class CreateBazUseCase(BaseUseCase[CreateBazRequest, CreateBazResponse]):
    """Use case for creating a Baz."""

    def __init__(self, baz_service: BazService) -> None:
        """Initialize create Baz use case.

        Args:
            baz_service: Baz domain service
        """
        self.baz_service = baz_service

    async def execute(self, request: CreateBazRequest) -> CreateBazResponse:
        """Execute create Baz flow.

        Args:
            request: Create Baz request

        Returns:
            The persisted Baz, including its assigned id

        Raises:
            PersistenceError: If the insert was rolled back
        """
        with logfire.span("create_baz.execute"):
            baz = await self.baz_service.create_baz(request.payload)
            return CreateBazResponse(id=baz.id, payload=baz.payload)

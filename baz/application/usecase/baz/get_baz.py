"""Get Baz use case."""

from typing import Optional

from pydantic import BaseModel

from baz.application.usecase.base import BaseUseCase
from baz.domain.service import BazService
from baz.domain.value import BazId


class GetBazRequest(BaseModel):
    """Get Baz request."""

    baz_id: int


class GetBazResponse(BaseModel):
    """Get Baz response."""

    id: int
    payload: str | None


class GetBazUseCase(BaseUseCase[GetBazRequest, Optional[GetBazResponse]]):
    """Use case for retrieving a Baz by ID."""

    def __init__(self, baz_service: BazService) -> None:
        self.baz_service = baz_service

    async def execute(self, request: GetBazRequest) -> Optional[GetBazResponse]:
        """Execute get Baz flow.

        Returns:
            Baz details if found, None otherwise
        """
        baz = await self.baz_service.get_baz_by_id(BazId(request.baz_id))
        if baz is None:
            return None
        return GetBazResponse(id=baz.id, payload=baz.payload)

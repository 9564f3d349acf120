"""Delete Baz use case."""

from pydantic import BaseModel

from baz.application.usecase.base import BaseUseCase
from baz.domain.service import BazService
from baz.domain.value import BazId


class DeleteBazRequest(BaseModel):
    """Delete Baz request."""

    baz_id: int


class DeleteBazUseCase(BaseUseCase[DeleteBazRequest, None]):
    """Use case for deleting a Baz."""

    def __init__(self, baz_service: BazService) -> None:
        self.baz_service = baz_service

    async def execute(self, request: DeleteBazRequest) -> None:
        """Execute delete Baz flow.

        Raises:
            NotFoundError: If no Baz has this id
            PersistenceError: If the delete was rolled back
        """
        await self.baz_service.delete_baz(BazId(request.baz_id))

"""Update Baz use case."""

import logfire
from pydantic import BaseModel

from baz.application.usecase.base import BaseUseCase
from baz.domain.error import ValidationError
from baz.domain.service import BazService
from baz.domain.value import BazId


class UpdateBazRequest(BaseModel):
    """Update Baz request.

    ``baz_id`` addresses the record. ``body_id`` is the id the client sent in
    the entity body, if any; it must agree with ``baz_id``.
    """

    baz_id: int
    body_id: int | None = None
    payload: str | None = None


class UpdateBazResponse(BaseModel):
    """Update Baz response."""

    id: int
    payload: str | None


class UpdateBazUseCase(BaseUseCase[UpdateBazRequest, UpdateBazResponse]):
    """Use case for replacing a Baz's payload."""

    def __init__(self, baz_service: BazService) -> None:
        """Initialize update Baz use case.

        Args:
            baz_service: Baz domain service
        """
        self.baz_service = baz_service

    async def execute(self, request: UpdateBazRequest) -> UpdateBazResponse:
        """Execute update Baz flow.

        Args:
            request: Update Baz request

        Returns:
            Updated Baz

        Raises:
            ValidationError: If the body id contradicts the addressed id
            NotFoundError: If no Baz has the addressed id
            PersistenceError: If the update was rolled back
        """
        if request.body_id is not None and request.body_id != request.baz_id:
            logfire.warn(
                "Baz id mismatch", baz_id=request.baz_id, body_id=request.body_id
            )
            raise ValidationError(
                f"Body id {request.body_id} does not match path id {request.baz_id}"
            )

        baz = await self.baz_service.update_baz(BazId(request.baz_id), request.payload)
        return UpdateBazResponse(id=baz.id, payload=baz.payload)

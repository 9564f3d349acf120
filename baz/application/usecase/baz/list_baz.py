"""List Baz use case."""

import logfire
from pydantic import BaseModel, Field, model_validator

from baz.application.usecase.base import BaseUseCase
from baz.domain.service import BazService


class BazItem(BaseModel):
    """Baz item in response."""

    id: int
    payload: str | None


class ListBazRequest(BaseModel):
    """List Baz request.

    Without bounds every Baz is returned. With both bounds, the inclusive
    id-ordered slice [from_index, to_index] is returned.
    """

    from_index: int | None = Field(default=None, ge=0)
    to_index: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def check_bounds(self) -> "ListBazRequest":
        if (self.from_index is None) != (self.to_index is None):
            raise ValueError("Provide both from_index and to_index, or neither")
        return self


class ListBazResponse(BaseModel):
    """List Baz response."""

    items: list[BazItem]


class ListBazUseCase(BaseUseCase[ListBazRequest, ListBazResponse]):
    """Use case for listing Baz."""

    def __init__(self, baz_service: BazService) -> None:
        """Initialize list Baz use case.

        Args:
            baz_service: Baz domain service
        """
        self.baz_service = baz_service

    async def execute(self, request: ListBazRequest) -> ListBazResponse:
        """Execute list Baz flow.

        Args:
            request: List Baz request

        Returns:
            All Baz, or the requested slice

        Raises:
            ValidationError: If to_index precedes from_index
        """
        with logfire.span(
            "list_baz.execute",
            from_index=request.from_index,
            to_index=request.to_index,
        ):
            if request.from_index is None:
                items = await self.baz_service.list_baz()
            else:
                items = await self.baz_service.list_baz_range(
                    request.from_index, request.to_index
                )

            return ListBazResponse(
                items=[BazItem(id=baz.id, payload=baz.payload) for baz in items]
            )

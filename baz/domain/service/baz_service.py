"""Baz domain service."""

import logfire

from baz.domain.error import NotFoundError, ValidationError
from baz.domain.model.baz import Baz
from baz.domain.repository.baz import BazRepository
from baz.domain.value import BazId

from .base import Service


class BazService(Service):
    """Domain service for Baz operations."""

    span_prefix = "baz_service"

    def __init__(self, baz_repository: BazRepository) -> None:
        """Initialize Baz service.

        Args:
            baz_repository: Baz repository
        """
        self.baz_repository = baz_repository

    async def create_baz(self, payload: str | None) -> Baz:
        """Persist a new Baz.

        Args:
            payload: String payload

        Returns:
            Persisted Baz with its assigned id
        """
        with self._span("create_baz"):
            created = await self.baz_repository.create(Baz.new(payload))
            logfire.info("Baz created", baz_id=created.id)
            return created

    async def get_baz_by_id(self, baz_id: BazId) -> Baz | None:
        """Get a Baz by ID.

        Args:
            baz_id: Baz ID

        Returns:
            Baz if found, None otherwise
        """
        with self._span("get_baz_by_id", baz_id=baz_id):
            baz = await self.baz_repository.find(baz_id)
            if baz is None:
                logfire.warn("Baz not found", baz_id=baz_id)
            return baz

    async def update_baz(self, baz_id: BazId, payload: str | None) -> Baz:
        """Replace the payload of a stored Baz.

        Args:
            baz_id: Baz ID
            payload: New payload

        Returns:
            Updated Baz

        Raises:
            NotFoundError: If no Baz has this id
        """
        with self._span("update_baz", baz_id=baz_id):
            updated = await self.baz_repository.edit(Baz(id=baz_id, payload=payload))
            logfire.info("Baz updated", baz_id=baz_id)
            return updated

    async def delete_baz(self, baz_id: BazId) -> None:
        """Look up a Baz by id and remove it.

        Args:
            baz_id: Baz ID

        Raises:
            NotFoundError: If no Baz has this id
        """
        with self._span("delete_baz", baz_id=baz_id):
            baz = await self.baz_repository.find(baz_id)
            if baz is None:
                raise NotFoundError("Baz", str(baz_id))
            await self.baz_repository.remove(baz)
            logfire.info("Baz deleted", baz_id=baz_id)

    async def list_baz(self) -> list[Baz]:
        with self._span("list_baz"):
            items = await self.baz_repository.find_all()
            logfire.info("Baz listed", count=len(items))
            return items

    async def list_baz_range(self, from_index: int, to_index: int) -> list[Baz]:
        """Get an inclusive, id-ordered slice of all Baz.

        Raises:
            ValidationError: If the bounds are invalid
        """
        with self._span("list_baz_range", from_index=from_index, to_index=to_index):
            try:
                return await self.baz_repository.find_range(from_index, to_index)
            except ValidationError as e:
                logfire.warn("Invalid Baz range", error=str(e))
                raise

    async def count_baz(self) -> int:
        with self._span("count_baz"):
            return await self.baz_repository.count()

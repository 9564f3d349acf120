"""Generic entity repository interface.

Every mutation runs in its own transaction: it either commits, or rolls back
and raises. Nothing is swallowed, so a caller never has to re-read the store
to learn whether a write happened.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from baz.domain.error import ValidationError
from baz.domain.model.common import Entity

E = TypeVar("E", bound=Entity)


class EntityRepository(ABC, Generic[E]):
    """CRUD interface for a single entity type."""

    @abstractmethod
    async def create(self, entity: E) -> E:
        """Persist a new entity.

        Args:
            entity: Entity to insert (its id, if any, is ignored)

        Returns:
            Copy of the entity carrying the store-assigned id

        Raises:
            PersistenceError: If the store rejected the insert
        """
        pass

    @abstractmethod
    async def edit(self, entity: E) -> E:
        """Merge the entity's state into the stored record.

        An entity without an id is created instead.

        Args:
            entity: Entity carrying the new state

        Returns:
            The merged entity

        Raises:
            NotFoundError: If the id does not match a stored record
            PersistenceError: If the store rejected the update
        """
        pass

    @abstractmethod
    async def remove(self, entity: E) -> None:
        """Delete the stored record matching the entity's id.

        Args:
            entity: Entity to delete

        Raises:
            NotFoundError: If the entity is unpersisted or already gone
            PersistenceError: If the store rejected the delete
        """
        pass

    @abstractmethod
    async def find(self, entity_id: int) -> E | None:
        """Find an entity by primary key.

        Args:
            entity_id: Primary key

        Returns:
            Entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[E]:
        """Return every entity, ordered by id."""
        pass

    @abstractmethod
    async def find_range(self, from_index: int, to_index: int) -> list[E]:
        """Return the inclusive slice [from_index, to_index] of find_all().

        Args:
            from_index: Zero-based offset of the first entity
            to_index: Zero-based offset of the last entity (inclusive)

        Returns:
            Up to ``to_index - from_index + 1`` entities; fewer (possibly none)
            when the range runs past the end

        Raises:
            ValidationError: If from_index is negative or to_index < from_index
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored entities."""
        pass


def validate_range(from_index: int, to_index: int) -> tuple[int, int]:
    """Check range bounds and convert them to (offset, limit)."""
    if from_index < 0:
        raise ValidationError(f"Range start must be >= 0, got {from_index}")
    if to_index < from_index:
        raise ValidationError(
            f"Range end ({to_index}) must not precede range start ({from_index})"
        )
    return from_index, to_index - from_index + 1

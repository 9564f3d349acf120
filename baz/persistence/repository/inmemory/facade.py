"""In-memory counterpart of the SQL facade for testing."""

from copy import deepcopy
from itertools import count

from baz.domain.error import NotFoundError
from baz.domain.repository.base import E, EntityRepository, validate_range


class InMemoryFacade(EntityRepository[E]):
    """Dict-backed EntityRepository.

    Ids come from a counter that never goes backwards, so removed ids are
    never handed out again.
    """

    def __init__(self, entity_type: type[E]) -> None:
        """Initialize empty repository."""
        self.entity_type = entity_type
        self._entities: dict[int, E] = {}
        self._ids = count(1)

    @property
    def resource(self) -> str:
        return self.entity_type.__name__

    async def create(self, entity: E) -> E:
        """Store the entity under a fresh id."""
        created = entity.model_copy(update={"id": next(self._ids)})
        self._entities[created.id] = deepcopy(created)
        return created

    async def edit(self, entity: E) -> E:
        """Replace the stored entity, or create when it has no id."""
        if entity.id is None:
            return await self.create(entity)
        if entity.id not in self._entities:
            raise NotFoundError(self.resource, str(entity.id))
        self._entities[entity.id] = deepcopy(entity)
        return deepcopy(entity)

    async def remove(self, entity: E) -> None:
        """Delete the stored entity."""
        if entity.id is None or entity.id not in self._entities:
            raise NotFoundError(self.resource, str(entity.id))
        del self._entities[entity.id]

    async def find(self, entity_id: int) -> E | None:
        """Find entity by ID."""
        entity = self._entities.get(entity_id)
        return deepcopy(entity) if entity is not None else None

    async def find_all(self) -> list[E]:
        """Find all entities, ordered by id."""
        return [deepcopy(self._entities[key]) for key in sorted(self._entities)]

    async def find_range(self, from_index: int, to_index: int) -> list[E]:
        """Find the inclusive [from_index, to_index] slice of find_all()."""
        offset, limit = validate_range(from_index, to_index)
        return (await self.find_all())[offset : offset + limit]

    async def count(self) -> int:
        return len(self._entities)

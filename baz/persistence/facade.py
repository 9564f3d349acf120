"""Generic transactional facade over an async SQLAlchemy session.

One instance serves one entity type. It is parametrized by the entity type,
the table holding it, the session to run against, and the two mapping
functions between rows and entities. Concrete repositories only bind those
arguments.

Every mutation follows the same shape: begin, operate, commit. Any store
error rolls the transaction back and is re-raised as PersistenceError, so
"nothing happened" and "committed" are always distinguishable.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable

import logfire
from sqlalchemy import Column, Select, Table, delete, func, insert, select, update
from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from baz.domain.error import NotFoundError, PersistenceError
from baz.domain.repository.base import E, EntityRepository, validate_range


class SqlAlchemyFacade(EntityRepository[E]):
    """EntityRepository implementation for any table with an integer primary key."""

    def __init__(
        self,
        entity_type: type[E],
        table: Table,
        session: AsyncSession,
        *,
        to_entity: Callable[[dict[str, Any]], E],
        to_row: Callable[[E], dict[str, Any]],
    ) -> None:
        """Initialize facade.

        Args:
            entity_type: Domain entity class served by this facade
            table: Table backing the entity
            session: Async database session (request scoped)
            to_entity: Row dict -> entity
            to_row: Entity -> row dict
        """
        self.entity_type = entity_type
        self.table = table
        self.session = session
        self._to_entity = to_entity
        self._to_row = to_row

    @property
    def resource(self) -> str:
        return self.entity_type.__name__

    @property
    def _pk(self) -> Column:
        return next(iter(self.table.primary_key.columns))

    def _values(self, entity: E) -> dict[str, Any]:
        """Row values without the primary key (the store owns it)."""
        row = self._to_row(entity)
        row.pop(self._pk.name, None)
        return row

    @asynccontextmanager
    async def _transaction(self, operation: str) -> AsyncIterator[AsyncSession]:
        """Begin, yield, commit; roll back on any failure."""
        if not self.session.in_transaction():
            await self.session.begin()
        try:
            yield self.session
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logfire.warn(
                "Transaction rolled back",
                operation=operation,
                resource=self.resource,
                error=str(e),
            )
            raise PersistenceError(operation, self.resource) from e
        except Exception:
            await self.session.rollback()
            raise

    async def _read(self, operation: str, stmt: Select) -> Result:
        try:
            return await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logfire.warn(
                "Read failed", operation=operation, resource=self.resource, error=str(e)
            )
            raise PersistenceError(operation, self.resource) from e

    async def create(self, entity: E) -> E:
        """Insert the entity and return it with its new id."""
        async with self._transaction("create"):
            result = await self.session.execute(
                insert(self.table).values(**self._values(entity))
            )
            new_id = result.inserted_primary_key[0]
        return entity.model_copy(update={"id": new_id})

    async def edit(self, entity: E) -> E:
        """Merge: update the matching row, or create when the entity has no id."""
        if entity.id is None:
            return await self.create(entity)

        async with self._transaction("edit"):
            result = await self.session.execute(
                update(self.table)
                .where(self._pk == entity.id)
                .values(**self._values(entity))
            )
            if result.rowcount == 0:
                raise NotFoundError(self.resource, str(entity.id))
        return entity

    async def remove(self, entity: E) -> None:
        """Reconcile against the stored row, then delete it."""
        if entity.id is None:
            raise NotFoundError(self.resource, "None")

        async with self._transaction("remove"):
            existing = await self.session.execute(
                select(self._pk).where(self._pk == entity.id)
            )
            if existing.scalar_one_or_none() is None:
                raise NotFoundError(self.resource, str(entity.id))
            await self.session.execute(delete(self.table).where(self._pk == entity.id))

    async def find(self, entity_id: int) -> E | None:
        """Find entity by primary key."""
        result = await self._read(
            "find", select(self.table).where(self._pk == entity_id)
        )
        row = result.fetchone()
        return self._to_entity(row._asdict()) if row else None

    async def find_all(self) -> list[E]:
        """Find all entities, ordered by primary key."""
        result = await self._read("find_all", select(self.table).order_by(self._pk))
        return [self._to_entity(row._asdict()) for row in result.fetchall()]

    async def find_range(self, from_index: int, to_index: int) -> list[E]:
        """Find the inclusive [from_index, to_index] slice of find_all()."""
        offset, limit = validate_range(from_index, to_index)
        stmt = select(self.table).order_by(self._pk).offset(offset).limit(limit)
        result = await self._read("find_range", stmt)
        return [self._to_entity(row._asdict()) for row in result.fetchall()]

    async def count(self) -> int:
        """Count entities."""
        result = await self._read(
            "count", select(func.count()).select_from(self.table)
        )
        return int(result.scalar_one())

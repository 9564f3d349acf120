"""SQL implementation of Baz repository."""

from sqlalchemy.ext.asyncio import AsyncSession

from baz.domain.model.baz import Baz
from baz.domain.repository.baz import BazRepository
from baz.persistence.facade import SqlAlchemyFacade
from baz.persistence.mappers import baz_to_dict, row_to_baz
from baz.persistence.tables import baz_table


class SqlBazRepository(SqlAlchemyFacade[Baz], BazRepository):
    """BazRepository backed by the ``baz`` table."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        super().__init__(
            Baz, baz_table, session, to_entity=row_to_baz, to_row=baz_to_dict
        )

"""Baz repository interface."""

from baz.domain.model.baz import Baz
from baz.domain.repository.base import EntityRepository


class BazRepository(EntityRepository[Baz]):
    """Repository interface for Baz entities."""

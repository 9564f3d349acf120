"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic objects, so rows are mapped by hand
instead of through SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict

from baz.domain.model import Baz


def row_to_baz(row: Dict[str, Any]) -> Baz:
    """Convert database row to Baz domain model.

    Args:
        row: Database row as dict

    Returns:
        Baz domain model
    """
    return Baz(id=row["id"], payload=row.get("baz_data"))


def baz_to_dict(baz: Baz) -> Dict[str, Any]:
    """Convert Baz domain model to database dict.

    Args:
        baz: Baz domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {"id": baz.id, "baz_data": baz.payload}

"""Baz entity."""

from baz.domain.model.common import Entity


class Baz(Entity):
    """A single string payload with a generated identifier.

    Created with ``id=None``; the store assigns the id on create and it never
    changes afterwards. Edits produce a new instance via ``with_payload``.
    """

    payload: str | None = None

    @classmethod
    def new(cls, payload: str | None) -> "Baz":
        """Named constructor for an unpersisted Baz."""
        return cls(id=None, payload=payload)

    def with_id(self, baz_id: int) -> "Baz":
        return self.model_copy(update={"id": baz_id})

    def with_payload(self, payload: str | None) -> "Baz":
        return self.model_copy(update={"payload": payload})

    def __repr__(self) -> str:
        return f"Baz(id={self.id})"

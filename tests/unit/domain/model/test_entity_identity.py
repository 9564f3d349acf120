"""Unit tests for entity identity and equality."""

from baz.domain.model import Baz, Entity
from tests.conftest import make_baz


class Other(Entity):
    pass


class TestEntityEquality:
    """Equality is decided by id alone."""

    def test_same_id_is_equal_regardless_of_payload(self):
        assert make_baz("a", baz_id=1) == make_baz("b", baz_id=1)

    def test_different_ids_are_not_equal(self):
        assert make_baz("a", baz_id=1) != make_baz("a", baz_id=2)

    def test_unpersisted_entities_are_never_equal(self):
        """Two entities without ids differ even with identical payloads."""
        assert make_baz("a") != make_baz("a")

    def test_unpersisted_entity_is_not_equal_to_itself(self):
        baz = make_baz("a")
        assert not (baz == baz)

    def test_unpersisted_never_equals_persisted(self):
        assert make_baz("a") != make_baz("a", baz_id=1)

    def test_different_entity_types_with_same_id_are_not_equal(self):
        assert Baz(id=1) != Other(id=1)

    def test_comparison_with_non_entity(self):
        assert make_baz("a", baz_id=1) != 1


class TestEntityHash:
    def test_equal_entities_share_a_hash(self):
        assert hash(make_baz("a", baz_id=7)) == hash(make_baz("b", baz_id=7))

    def test_persisted_entities_deduplicate_in_sets(self):
        items = {make_baz("a", baz_id=1), make_baz("b", baz_id=1), make_baz(baz_id=2)}
        assert len(items) == 2


class TestBazModel:
    def test_new_is_unpersisted(self):
        baz = Baz.new("hello")
        assert baz.id is None
        assert not baz.is_persisted
        assert baz.payload == "hello"

    def test_with_payload_keeps_identity(self):
        baz = make_baz("hello", baz_id=3)
        changed = baz.with_payload("world")

        assert changed == baz
        assert changed.payload == "world"
        assert baz.payload == "hello"

    def test_with_id_marks_persisted(self):
        assert Baz.new("x").with_id(5).is_persisted

    def test_repr_shows_id_only(self):
        assert repr(make_baz("secret", baz_id=4)) == "Baz(id=4)"

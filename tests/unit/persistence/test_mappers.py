"""Unit tests for row <-> entity mapping."""

from baz.domain.model import Baz
from baz.persistence.mappers import baz_to_dict, row_to_baz


def test_row_to_baz_maps_columns():
    baz = row_to_baz({"id": 3, "baz_data": "hello"})

    assert baz.id == 3
    assert baz.payload == "hello"


def test_row_to_baz_with_null_payload():
    assert row_to_baz({"id": 1, "baz_data": None}).payload is None


def test_baz_to_dict_uses_column_names():
    assert baz_to_dict(Baz(id=2, payload="x")) == {"id": 2, "baz_data": "x"}

"""Strongly typed identifiers for domain entities."""

from typing import NewType

BazId = NewType("BazId", int)

# Largest id the ``baz.id`` INTEGER column can hold
MAX_BAZ_ID = 2**31 - 1

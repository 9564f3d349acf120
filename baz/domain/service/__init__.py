"""Domain services."""

from .base import Service
from .baz_service import BazService

__all__ = [
    "BazService",
    "Service",
]

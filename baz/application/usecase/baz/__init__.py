"""Baz use cases."""

from .count_baz import CountBazResponse, CountBazUseCase
from .create_baz import CreateBazRequest, CreateBazResponse, CreateBazUseCase
from .delete_baz import DeleteBazRequest, DeleteBazUseCase
from .get_baz import GetBazRequest, GetBazResponse, GetBazUseCase
from .list_baz import BazItem, ListBazRequest, ListBazResponse, ListBazUseCase
from .update_baz import UpdateBazRequest, UpdateBazResponse, UpdateBazUseCase

__all__ = [
    "BazItem",
    "CountBazResponse",
    "CountBazUseCase",
    "CreateBazRequest",
    "CreateBazResponse",
    "CreateBazUseCase",
    "DeleteBazRequest",
    "DeleteBazUseCase",
    "GetBazRequest",
    "GetBazResponse",
    "GetBazUseCase",
    "ListBazRequest",
    "ListBazResponse",
    "ListBazUseCase",
    "UpdateBazRequest",
    "UpdateBazResponse",
    "UpdateBazUseCase",
]

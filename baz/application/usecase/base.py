"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One application operation: a request model in, a response model out.

    Use cases translate between transport-neutral pydantic models and domain
    entities. They never touch the session or repositories directly.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass

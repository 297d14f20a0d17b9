"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Orchestrates domain services for one API operation.

    Requests carry IDs as strings straight from the HTTP layer; the use case
    converts them to typed identifiers before calling services.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass

"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One invitation or onboarding operation behind an API route.

    Use cases check who is calling, drive the domain services and shape the
    response. Business failures come back as ``Err`` values; only
    infrastructure faults raise.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass

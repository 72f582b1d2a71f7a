"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Transaction boundary of the current request.

    Lets a service make its writes durable before triggering side effects
    that must only happen after commit (e.g. sending the invitation e-mail).
    """

    @abstractmethod
    async def commit(self) -> None:
        """Commit everything written so far in this request."""
        pass

"""In-memory unit of work for testing."""

from onboard.domain.repository.unit_of_work import UnitOfWork

from .store import InMemoryStore


class InMemoryUnitOfWork(UnitOfWork):
    """Writes are applied immediately; commit only counts the calls."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def commit(self) -> None:
        self.store.commits += 1

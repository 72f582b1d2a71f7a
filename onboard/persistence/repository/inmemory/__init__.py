"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository
from .company import InMemoryCompanyRepository, InMemoryContactRepository
from .invitation import InMemoryInvitationRepository
from .store import InMemoryStore
from .unit_of_work import InMemoryUnitOfWork
from .workspace import InMemoryWorkspaceRepository

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryCompanyRepository",
    "InMemoryContactRepository",
    "InMemoryInvitationRepository",
    "InMemoryStore",
    "InMemoryUnitOfWork",
    "InMemoryWorkspaceRepository",
]

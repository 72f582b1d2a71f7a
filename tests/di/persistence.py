"""Mock persistence providers for testing."""

from dishka import Scope, provide

from onboard.domain.repository import (
    AccountRepository,
    CompanyRepository,
    ContactRepository,
    InvitationRepository,
    UnitOfWork,
    WorkspaceRepository,
)
from onboard.persistence.repository.inmemory import (
    InMemoryAccountRepository,
    InMemoryCompanyRepository,
    InMemoryContactRepository,
    InMemoryInvitationRepository,
    InMemoryStore,
    InMemoryUnitOfWork,
    InMemoryWorkspaceRepository,
)
from onboard.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped so that consecutive requests against one
    container share their data; each test builds its own container.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, store: InMemoryStore) -> UnitOfWork:
        return InMemoryUnitOfWork(store)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(self, store: InMemoryStore) -> InvitationRepository:
        """Provide in-memory invitation repository."""
        return InMemoryInvitationRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_company_repository(self, store: InMemoryStore) -> CompanyRepository:
        """Provide in-memory company repository."""
        return InMemoryCompanyRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_contact_repository(self, store: InMemoryStore) -> ContactRepository:
        """Provide in-memory contact repository."""
        return InMemoryContactRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_account_repository(self, store: InMemoryStore) -> AccountRepository:
        """Provide in-memory account repository."""
        return InMemoryAccountRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_workspace_repository(self, store: InMemoryStore) -> WorkspaceRepository:
        """Provide in-memory workspace repository."""
        return InMemoryWorkspaceRepository(store)

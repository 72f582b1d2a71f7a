"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from onboard.config import Settings
from onboard.domain.repository import (
    AccountRepository,
    CompanyRepository,
    ContactRepository,
    InvitationRepository,
    UnitOfWork,
    WorkspaceRepository,
)
from onboard.persistence.database import create_engine, create_session_factory
from onboard.persistence.repository import (
    PostgresAccountRepository,
    PostgresCompanyRepository,
    PostgresContactRepository,
    PostgresInvitationRepository,
    PostgresWorkspaceRepository,
    SqlAlchemyUnitOfWork,
)
from onboard.util.di.base import ProviderBase
from onboard.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the app shuts down."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide the request unit of work."""
        return SqlAlchemyUnitOfWork(session)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(self, session: AsyncSession) -> InvitationRepository:
        """Provide Invitation repository."""
        return PostgresInvitationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_company_repository(self, session: AsyncSession) -> CompanyRepository:
        """Provide Company repository."""
        return PostgresCompanyRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_contact_repository(self, session: AsyncSession) -> ContactRepository:
        """Provide Contact repository."""
        return PostgresContactRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_account_repository(self, session: AsyncSession) -> AccountRepository:
        """Provide Account repository."""
        return PostgresAccountRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_workspace_repository(self, session: AsyncSession) -> WorkspaceRepository:
        """Provide Workspace repository."""
        return PostgresWorkspaceRepository(session)

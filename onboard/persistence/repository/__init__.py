"""PostgreSQL repository implementations."""

from onboard.persistence.repository.account import PostgresAccountRepository
from onboard.persistence.repository.company import (
    PostgresCompanyRepository,
    PostgresContactRepository,
)
from onboard.persistence.repository.invitation import PostgresInvitationRepository
from onboard.persistence.repository.unit_of_work import SqlAlchemyUnitOfWork
from onboard.persistence.repository.workspace import PostgresWorkspaceRepository

__all__ = [
    "PostgresAccountRepository",
    "PostgresCompanyRepository",
    "PostgresContactRepository",
    "PostgresInvitationRepository",
    "PostgresWorkspaceRepository",
    "SqlAlchemyUnitOfWork",
]

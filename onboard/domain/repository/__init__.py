"""Repository interfaces for the onboarding domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from onboard.domain.repository.account import AccountRepository
from onboard.domain.repository.company import CompanyRepository, ContactRepository
from onboard.domain.repository.invitation import InvitationRepository
from onboard.domain.repository.unit_of_work import UnitOfWork
from onboard.domain.repository.workspace import WorkspaceRepository

__all__ = [
    "AccountRepository",
    "CompanyRepository",
    "ContactRepository",
    "InvitationRepository",
    "UnitOfWork",
    "WorkspaceRepository",
]

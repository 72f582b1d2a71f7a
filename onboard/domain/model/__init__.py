"""Domain model entities for onboarding."""

from onboard.domain.model.account import UserAccount
from onboard.domain.model.company import Company, Contact
from onboard.domain.model.invitation import Invitation
from onboard.domain.model.workspace import Workspace, WorkspaceMember

__all__ = [
    "Company",
    "Contact",
    "Invitation",
    "UserAccount",
    "Workspace",
    "WorkspaceMember",
]

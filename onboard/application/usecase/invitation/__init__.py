"""Invitation use cases."""

from onboard.application.usecase.invitation.get_invitation_state import (
    GetInvitationStateRequest,
    GetInvitationStateResponse,
    GetInvitationStateUseCase,
    InvitationState,
)
from onboard.application.usecase.invitation.issue_client_invitation import (
    IssueClientInvitationRequest,
    IssueClientInvitationUseCase,
)
from onboard.application.usecase.invitation.issue_team_invitation import (
    IssueTeamInvitationRequest,
    IssueTeamInvitationUseCase,
)
from onboard.application.usecase.invitation.list_company_invitations import (
    ListCompanyInvitationsRequest,
    ListCompanyInvitationsResponse,
    ListCompanyInvitationsUseCase,
)
from onboard.application.usecase.invitation.list_workspace_invitations import (
    ListWorkspaceInvitationsRequest,
    ListWorkspaceInvitationsResponse,
    ListWorkspaceInvitationsUseCase,
)
from onboard.application.usecase.invitation.revoke_invitation import (
    RevokeInvitationRequest,
    RevokeInvitationUseCase,
)

__all__ = [
    "GetInvitationStateRequest",
    "GetInvitationStateResponse",
    "GetInvitationStateUseCase",
    "InvitationState",
    "IssueClientInvitationRequest",
    "IssueClientInvitationUseCase",
    "IssueTeamInvitationRequest",
    "IssueTeamInvitationUseCase",
    "ListCompanyInvitationsRequest",
    "ListCompanyInvitationsResponse",
    "ListCompanyInvitationsUseCase",
    "ListWorkspaceInvitationsRequest",
    "ListWorkspaceInvitationsResponse",
    "ListWorkspaceInvitationsUseCase",
    "RevokeInvitationRequest",
    "RevokeInvitationUseCase",
]

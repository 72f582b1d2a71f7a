"""Team use cases."""

from onboard.application.usecase.team.accept_team_invitation import (
    AcceptTeamInvitationRequest,
    AcceptTeamInvitationResponse,
    AcceptTeamInvitationUseCase,
)

__all__ = [
    "AcceptTeamInvitationRequest",
    "AcceptTeamInvitationResponse",
    "AcceptTeamInvitationUseCase",
]

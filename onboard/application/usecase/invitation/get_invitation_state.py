"""Get invitation state use case."""

from datetime import datetime
from enum import Enum

import logfire
from pydantic import BaseModel

from onboard.application.usecase.base import BaseUseCase
from onboard.application.usecase.common import invitation_of_kind
from onboard.domain.model import Invitation
from onboard.domain.repository import (
    CompanyRepository,
    ContactRepository,
    WorkspaceRepository,
)
from onboard.domain.service import InvitationService
from onboard.domain.value import (
    Err,
    InvitationKind,
    InvitationStatus,
    OnboardingState,
    TeamRole,
)


class InvitationState(str, Enum):
    """What the invitee sees when opening the link."""

    VALID = "valid"
    EXPIRED = "expired"
    USED = "used"
    REVOKED = "revoked"
    NOT_FOUND = "not_found"


_STATES = {
    InvitationStatus.PENDING: InvitationState.VALID,
    InvitationStatus.EXPIRED: InvitationState.EXPIRED,
    InvitationStatus.ACCEPTED: InvitationState.USED,
    InvitationStatus.REVOKED: InvitationState.REVOKED,
}


class GetInvitationStateRequest(BaseModel):
    """Look up a link of a given kind."""

    token: str
    kind: InvitationKind


class GetInvitationStateResponse(BaseModel):
    """Invitation state with the details needed to render the landing page."""

    state: InvitationState
    kind: InvitationKind
    email: str | None = None
    expires_at: datetime | None = None

    # Client portal
    company_name: str | None = None
    contact_name: str | None = None
    onboarding_state: OnboardingState | None = None

    # Team
    role: TeamRole | None = None
    workspace_name: str | None = None


class GetInvitationStateUseCase(BaseUseCase):
    """Read-only entry point behind ``/onboarding/{token}`` and ``/invitations/{token}``.

    Reading applies lazy expiry, so an overdue link is reported (and stored)
    as expired.
    """

    def __init__(
        self,
        invitation_service: InvitationService,
        company_repository: CompanyRepository,
        contact_repository: ContactRepository,
        workspace_repository: WorkspaceRepository,
    ) -> None:
        self.invitation_service = invitation_service
        self.company_repository = company_repository
        self.contact_repository = contact_repository
        self.workspace_repository = workspace_repository

    async def execute(
        self, request: GetInvitationStateRequest
    ) -> GetInvitationStateResponse:
        with logfire.span(
            "get_invitation_state.execute",
            token=request.token[:8] + "...",
            kind=request.kind.value,
        ):
            resolved = invitation_of_kind(
                await self.invitation_service.resolve(request.token), request.kind
            )
            if isinstance(resolved, Err):
                return GetInvitationStateResponse(
                    state=InvitationState.NOT_FOUND, kind=request.kind
                )

            invitation = resolved.value
            response = GetInvitationStateResponse(
                state=_STATES[invitation.status],
                kind=invitation.kind,
                expires_at=invitation.expires_at,
            )
            if invitation.kind == InvitationKind.CLIENT_PORTAL:
                response = await self._client_details(invitation, response)
            else:
                response = await self._team_details(invitation, response)

            logfire.info(
                "Invitation state resolved",
                invitation_id=str(invitation.id),
                state=response.state.value,
            )
            return response

    async def _client_details(
        self, invitation: Invitation, response: GetInvitationStateResponse
    ) -> GetInvitationStateResponse:
        company = await self.company_repository.find_by_id(invitation.company_id)
        contact = await self.contact_repository.find_by_id(invitation.contact_id)
        return response.model_copy(
            update={
                "company_name": company.name if company else None,
                "onboarding_state": company.onboarding_state if company else None,
                "contact_name": contact.full_name if contact else None,
                "email": contact.email if contact else None,
            }
        )

    async def _team_details(
        self, invitation: Invitation, response: GetInvitationStateResponse
    ) -> GetInvitationStateResponse:
        workspace = await self.workspace_repository.find_by_id(invitation.workspace_id)
        return response.model_copy(
            update={
                "email": invitation.email,
                "role": invitation.role,
                "workspace_name": workspace.name if workspace else None,
            }
        )

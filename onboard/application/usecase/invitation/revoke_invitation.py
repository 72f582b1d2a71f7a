"""Revoke invitation use case."""

import logfire
from pydantic import BaseModel

from onboard.application.usecase.base import BaseUseCase
from onboard.application.usecase.common import InvitationItem, load_actor, parse_id
from onboard.domain.repository import AccountRepository
from onboard.domain.service import InvitationService, invitation_link
from onboard.domain.value import (
    AccountType,
    Err,
    ErrorKind,
    InvitationId,
    Ok,
    Result,
)


class RevokeInvitationRequest(BaseModel):
    """Revoke an invitation by ID."""

    actor_id: str
    invitation_id: str


class RevokeInvitationUseCase(BaseUseCase):
    """Staff action: withdraw an invitation.

    Revoking an invitation that is already accepted, expired or revoked
    succeeds and leaves it unchanged.
    """

    def __init__(
        self,
        invitation_service: InvitationService,
        account_repository: AccountRepository,
        frontend_url: str,
    ) -> None:
        self.invitation_service = invitation_service
        self.account_repository = account_repository
        self.frontend_url = frontend_url

    async def execute(self, request: RevokeInvitationRequest) -> Result[InvitationItem]:
        with logfire.span(
            "revoke_invitation.execute", invitation_id=request.invitation_id
        ):
            actor = await load_actor(
                self.account_repository, request.actor_id, AccountType.INTERNAL
            )
            if isinstance(actor, Err):
                return actor

            invitation_uuid = parse_id(request.invitation_id, "invitation_id")
            if invitation_uuid is None:
                return Err(ErrorKind.NOT_FOUND, "Invitation not found")

            revoked = await self.invitation_service.revoke(InvitationId(invitation_uuid))
            if isinstance(revoked, Err):
                return revoked

            logfire.info(
                "Invitation revoke requested",
                invitation_id=request.invitation_id,
                actor_id=str(actor.value.id),
                status=revoked.value.status.value,
            )
            return Ok(
                InvitationItem.from_invitation(
                    revoked.value, invitation_link(self.frontend_url, revoked.value)
                )
            )

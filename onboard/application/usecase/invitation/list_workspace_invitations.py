"""List workspace invitations use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from onboard.application.usecase.base import BaseUseCase
from onboard.application.usecase.common import InvitationItem, load_actor, parse_id
from onboard.domain.repository import AccountRepository, WorkspaceRepository
from onboard.domain.service import InvitationService, invitation_link
from onboard.domain.value import (
    AccountType,
    Err,
    ErrorKind,
    InvitationStatus,
    Ok,
    Result,
    WorkspaceId,
)


class ListWorkspaceInvitationsRequest(BaseModel):
    actor_id: str
    workspace_id: str
    status: Optional[InvitationStatus] = None


class ListWorkspaceInvitationsResponse(BaseModel):
    invitations: list[InvitationItem]


class ListWorkspaceInvitationsUseCase(BaseUseCase):
    """Team invitations of a workspace, visible to its owner and members."""

    def __init__(
        self,
        invitation_service: InvitationService,
        account_repository: AccountRepository,
        workspace_repository: WorkspaceRepository,
        frontend_url: str,
    ) -> None:
        self.invitation_service = invitation_service
        self.account_repository = account_repository
        self.workspace_repository = workspace_repository
        self.frontend_url = frontend_url

    async def execute(
        self, request: ListWorkspaceInvitationsRequest
    ) -> Result[ListWorkspaceInvitationsResponse]:
        with logfire.span(
            "list_workspace_invitations.execute", workspace_id=request.workspace_id
        ):
            actor = await load_actor(
                self.account_repository, request.actor_id, AccountType.INTERNAL
            )
            if isinstance(actor, Err):
                return actor

            workspace_uuid = parse_id(request.workspace_id, "workspace_id")
            workspace = (
                await self.workspace_repository.find_by_id(WorkspaceId(workspace_uuid))
                if workspace_uuid
                else None
            )
            if workspace is None:
                return Err(ErrorKind.NOT_FOUND, "Workspace not found")

            if workspace.owner_id != actor.value.id and (
                await self.workspace_repository.find_member(
                    workspace.id, actor.value.id
                )
                is None
            ):
                logfire.warn(
                    "Workspace invitations requested by outsider",
                    workspace_id=str(workspace.id),
                    actor_id=str(actor.value.id),
                )
                return Err(
                    ErrorKind.UNAUTHORIZED, "Only workspace members can see invitations"
                )

            invitations = await self.invitation_service.list_for_workspace(
                workspace.id, request.status
            )
            return Ok(
                ListWorkspaceInvitationsResponse(
                    invitations=[
                        InvitationItem.from_invitation(
                            invitation, invitation_link(self.frontend_url, invitation)
                        )
                        for invitation in invitations
                    ]
                )
            )

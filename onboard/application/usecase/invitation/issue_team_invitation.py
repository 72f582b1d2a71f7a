"""Issue team invitation use case."""

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
    InvitationNotice,
    InvitationTarget,
    Ok,
    Result,
    TeamRole,
    WorkspaceId,
    normalize_email,
)


class IssueTeamInvitationRequest(BaseModel):
    """Invite a teammate to a workspace by email."""

    actor_id: str
    workspace_id: str
    email: str
    role: TeamRole = TeamRole.MEMBER


class IssueTeamInvitationUseCase(BaseUseCase):
    """Workspace owner or admin invites a teammate."""

    def __init__(
        self,
        invitation_service: InvitationService,
        account_repository: AccountRepository,
        workspace_repository: WorkspaceRepository,
        max_workspace_members: int,
        frontend_url: str,
    ) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
            account_repository: Loads the calling account
            workspace_repository: Workspace and membership lookups
            max_workspace_members: Team size cap, owner included
            frontend_url: Base URL for invitation links
        """
        self.invitation_service = invitation_service
        self.account_repository = account_repository
        self.workspace_repository = workspace_repository
        self.max_workspace_members = max_workspace_members
        self.frontend_url = frontend_url

    async def execute(
        self, request: IssueTeamInvitationRequest
    ) -> Result[InvitationItem]:
        with logfire.span(
            "issue_team_invitation.execute",
            workspace_id=request.workspace_id,
            role=request.role.value,
        ):
            actor = await load_actor(
                self.account_repository, request.actor_id, AccountType.INTERNAL
            )
            if isinstance(actor, Err):
                return actor

            try:
                email = normalize_email(request.email)
            except ValueError:
                return Err(ErrorKind.INVALID_INPUT, "Invalid email address")

            workspace_uuid = parse_id(request.workspace_id, "workspace_id")
            workspace = (
                await self.workspace_repository.find_by_id(WorkspaceId(workspace_uuid))
                if workspace_uuid
                else None
            )
            if workspace is None:
                return Err(ErrorKind.NOT_FOUND, "Workspace not found")

            if workspace.owner_id != actor.value.id:
                membership = await self.workspace_repository.find_member(
                    workspace.id, actor.value.id
                )
                if membership is None or membership.role != TeamRole.ADMIN:
                    logfire.warn(
                        "Team invitation by non-admin rejected",
                        workspace_id=str(workspace.id),
                        actor_id=str(actor.value.id),
                    )
                    return Err(
                        ErrorKind.UNAUTHORIZED,
                        "Only the owner or an admin can invite teammates",
                    )

            if await self.workspace_repository.has_member_with_email(
                workspace.id, email
            ):
                return Err(
                    ErrorKind.DUPLICATE, "This person is already part of the workspace"
                )

            # Owner counts towards the limit
            people = await self.workspace_repository.count_members(workspace.id) + 1
            if people >= self.max_workspace_members:
                logfire.warn(
                    "Workspace member limit reached",
                    workspace_id=str(workspace.id),
                    people=people,
                    limit=self.max_workspace_members,
                )
                return Err(
                    ErrorKind.LIMIT_REACHED,
                    f"Workspace is limited to {self.max_workspace_members} people",
                    {"limit": self.max_workspace_members},
                )

            issued = await self.invitation_service.issue(
                InvitationTarget.team(workspace.id, email),
                InvitationNotice(
                    to=email,
                    recipient_name=email,
                    organisation_name=workspace.name,
                ),
                invited_by=actor.value.id,
                role=request.role,
            )
            if isinstance(issued, Err):
                return issued

            invitation = issued.value
            return Ok(
                InvitationItem.from_invitation(
                    invitation, invitation_link(self.frontend_url, invitation)
                )
            )

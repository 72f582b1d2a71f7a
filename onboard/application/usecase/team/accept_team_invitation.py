"""Accept team invitation use case."""

from uuid import uuid4

import logfire
from pydantic import BaseModel

from onboard.application.usecase.base import BaseUseCase
from onboard.application.usecase.onboarding.access import pending_invitation
from onboard.domain.model import WorkspaceMember
from onboard.domain.repository import WorkspaceRepository
from onboard.domain.service import (
    AccountLinker,
    Clock,
    InvitationService,
    JWTService,
)
from onboard.domain.value import (
    Err,
    ErrorKind,
    InvitationKind,
    Ok,
    Result,
    TeamRole,
    WorkspaceMemberId,
)


class AcceptTeamInvitationRequest(BaseModel):
    token: str
    name: str
    password: str


class AcceptTeamInvitationResponse(BaseModel):
    account_id: str
    email: str
    workspace_id: str
    role: TeamRole
    is_new: bool
    session_token: str


class AcceptTeamInvitationUseCase(BaseUseCase):
    """Join a workspace through a team invitation.

    Team invitations have no data gate: the account is resolved, the
    invitation consumed and the membership added in one request.
    """

    def __init__(
        self,
        invitation_service: InvitationService,
        account_linker: AccountLinker,
        workspace_repository: WorkspaceRepository,
        jwt_service: JWTService,
        clock: Clock,
        min_password_length: int,
        max_workspace_members: int,
    ) -> None:
        self.invitation_service = invitation_service
        self.account_linker = account_linker
        self.workspace_repository = workspace_repository
        self.jwt_service = jwt_service
        self.clock = clock
        self.min_password_length = min_password_length
        self.max_workspace_members = max_workspace_members

    async def execute(
        self, request: AcceptTeamInvitationRequest
    ) -> Result[AcceptTeamInvitationResponse]:
        with logfire.span(
            "accept_team_invitation.execute", token=request.token[:8] + "..."
        ):
            resolved = await pending_invitation(
                self.invitation_service, request.token, InvitationKind.TEAM
            )
            if isinstance(resolved, Err):
                return resolved
            invitation = resolved.value

            if len(request.password) < self.min_password_length:
                return Err(
                    ErrorKind.INVALID_INPUT,
                    f"Password must be at least {self.min_password_length} characters",
                )

            workspace = await self.workspace_repository.find_by_id(
                invitation.workspace_id
            )
            if workspace is None:
                return Err(ErrorKind.NOT_FOUND, "Workspace not found")

            # Checked before any account is created for the invitee
            joined = await self.workspace_repository.has_member_with_email(
                workspace.id, invitation.email
            )
            if not joined:
                people = await self.workspace_repository.count_members(workspace.id) + 1
                if people >= self.max_workspace_members:
                    logfire.warn(
                        "Workspace full at acceptance",
                        workspace_id=str(workspace.id),
                        people=people,
                    )
                    return Err(
                        ErrorKind.LIMIT_REACHED,
                        f"Workspace is limited to {self.max_workspace_members} people",
                        {"limit": self.max_workspace_members},
                    )

            linked = await self.account_linker.resolve_account(
                invitation, request.name, request.password
            )
            if isinstance(linked, Err):
                return linked
            account = linked.value.account

            consumed = await self.invitation_service.consume(invitation.token)
            if isinstance(consumed, Err):
                return consumed

            role = invitation.role or TeamRole.MEMBER
            if workspace.owner_id != account.id:
                await self.workspace_repository.add_member(
                    WorkspaceMember(
                        id=WorkspaceMemberId(uuid4()),
                        workspace_id=workspace.id,
                        account_id=account.id,
                        role=role,
                        joined_at=self.clock.now(),
                    )
                )

            logfire.info(
                "Team invitation accepted",
                workspace_id=str(workspace.id),
                account_id=str(account.id),
                role=role.value,
            )
            return Ok(
                AcceptTeamInvitationResponse(
                    account_id=str(account.id),
                    email=account.email,
                    workspace_id=str(workspace.id),
                    role=role,
                    is_new=linked.value.is_new,
                    session_token=self.jwt_service.create_token(account),
                )
            )

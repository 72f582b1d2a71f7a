"""Staff routes for issuing and listing invitations."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel

from onboard.application.usecase.common import InvitationItem
from onboard.application.usecase.invitation import (
    IssueClientInvitationRequest,
    IssueClientInvitationUseCase,
    IssueTeamInvitationRequest,
    IssueTeamInvitationUseCase,
    ListCompanyInvitationsRequest,
    ListCompanyInvitationsResponse,
    ListCompanyInvitationsUseCase,
    ListWorkspaceInvitationsRequest,
    ListWorkspaceInvitationsResponse,
    ListWorkspaceInvitationsUseCase,
)
from onboard.domain.service import JWTService
from onboard.domain.value import InvitationStatus, TeamRole
from onboard.interface.api.session import require_session
from onboard.interface.error import unwrap

router = APIRouter(tags=["staff"], route_class=DishkaRoute)


class ClientInvitationAPIRequest(BaseModel):
    contact_id: str


class TeamInvitationAPIRequest(BaseModel):
    email: str
    role: TeamRole = TeamRole.MEMBER


@router.post(
    "/companies/{company_id}/invitations",
    response_model=InvitationItem,
    status_code=status.HTTP_201_CREATED,
)
async def invite_contact(
    company_id: str,
    request: ClientInvitationAPIRequest,
    use_case: FromDishka[IssueClientInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> InvitationItem:
    """Send a company contact the client portal link."""
    payload = require_session(jwt_service, auth_token)
    return unwrap(
        await use_case.execute(
            IssueClientInvitationRequest(
                actor_id=payload.account_id,
                company_id=company_id,
                contact_id=request.contact_id,
            )
        )
    )


@router.get(
    "/companies/{company_id}/invitations",
    response_model=ListCompanyInvitationsResponse,
)
async def list_company_invitations(
    company_id: str,
    use_case: FromDishka[ListCompanyInvitationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListCompanyInvitationsResponse:
    """Portal invitations sent for a company, newest first."""
    payload = require_session(jwt_service, auth_token)
    return unwrap(
        await use_case.execute(
            ListCompanyInvitationsRequest(
                actor_id=payload.account_id, company_id=company_id
            )
        )
    )


@router.post(
    "/workspaces/{workspace_id}/invitations",
    response_model=InvitationItem,
    status_code=status.HTTP_201_CREATED,
)
async def invite_teammate(
    workspace_id: str,
    request: TeamInvitationAPIRequest,
    use_case: FromDishka[IssueTeamInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> InvitationItem:
    """Invite a teammate to a workspace."""
    payload = require_session(jwt_service, auth_token)
    return unwrap(
        await use_case.execute(
            IssueTeamInvitationRequest(
                actor_id=payload.account_id,
                workspace_id=workspace_id,
                email=request.email,
                role=request.role,
            )
        )
    )


@router.get(
    "/workspaces/{workspace_id}/invitations",
    response_model=ListWorkspaceInvitationsResponse,
)
async def list_workspace_invitations(
    workspace_id: str,
    use_case: FromDishka[ListWorkspaceInvitationsUseCase],
    jwt_service: FromDishka[JWTService],
    status_filter: InvitationStatus | None = Query(default=None, alias="status"),
    auth_token: str | None = Cookie(default=None),
) -> ListWorkspaceInvitationsResponse:
    """Team invitations of a workspace, newest first, optionally by status."""
    payload = require_session(jwt_service, auth_token)
    return unwrap(
        await use_case.execute(
            ListWorkspaceInvitationsRequest(
                actor_id=payload.account_id,
                workspace_id=workspace_id,
                status=status_filter,
            )
        )
    )

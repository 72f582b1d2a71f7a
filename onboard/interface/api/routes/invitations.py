"""Team invitation routes and invitation revocation."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response
from pydantic import BaseModel

from onboard.application.usecase.common import InvitationItem
from onboard.application.usecase.invitation import (
    GetInvitationStateRequest,
    GetInvitationStateResponse,
    GetInvitationStateUseCase,
    RevokeInvitationRequest,
    RevokeInvitationUseCase,
)
from onboard.application.usecase.team import (
    AcceptTeamInvitationRequest,
    AcceptTeamInvitationUseCase,
)
from onboard.config import Settings
from onboard.domain.service import JWTService
from onboard.domain.value import InvitationKind, TeamRole
from onboard.interface.api.session import require_session, set_session_cookie
from onboard.interface.error import unwrap

router = APIRouter(prefix="/invitations", tags=["invitations"], route_class=DishkaRoute)


class AcceptAPIRequest(BaseModel):
    name: str
    password: str


class AcceptAPIResponse(BaseModel):
    account_id: str
    email: str
    workspace_id: str
    role: TeamRole
    is_new: bool


@router.get("/{token}", response_model=GetInvitationStateResponse)
async def get_invitation_state(
    token: str,
    use_case: FromDishka[GetInvitationStateUseCase],
) -> GetInvitationStateResponse:
    """Landing page data for a team invitation."""
    return await use_case.execute(
        GetInvitationStateRequest(token=token, kind=InvitationKind.TEAM)
    )


@router.post("/{token}/accept", response_model=AcceptAPIResponse)
async def accept_invitation(
    token: str,
    request: AcceptAPIRequest,
    response: Response,
    use_case: FromDishka[AcceptTeamInvitationUseCase],
    settings: FromDishka[Settings],
) -> AcceptAPIResponse:
    """Join the workspace and sign in.

    Sets cookie: auth_token
    """
    result = unwrap(
        await use_case.execute(
            AcceptTeamInvitationRequest(
                token=token, name=request.name, password=request.password
            )
        )
    )
    set_session_cookie(response, result.session_token, settings)
    return AcceptAPIResponse(
        account_id=result.account_id,
        email=result.email,
        workspace_id=result.workspace_id,
        role=result.role,
        is_new=result.is_new,
    )


@router.post("/{invitation_id}/revoke", response_model=InvitationItem)
async def revoke_invitation(
    invitation_id: str,
    use_case: FromDishka[RevokeInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> InvitationItem:
    """Revoke an invitation; already terminal invitations are left as they are."""
    payload = require_session(jwt_service, auth_token)
    return unwrap(
        await use_case.execute(
            RevokeInvitationRequest(
                actor_id=payload.account_id, invitation_id=invitation_id
            )
        )
    )

"""Client onboarding routes, addressed by invitation token."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response
from pydantic import BaseModel

from onboard.application.usecase.common import CompanyView
from onboard.application.usecase.invitation import (
    GetInvitationStateRequest,
    GetInvitationStateResponse,
    GetInvitationStateUseCase,
)
from onboard.application.usecase.onboarding import (
    AcceptTermsRequest,
    AcceptTermsResponse,
    AcceptTermsUseCase,
    RegisterClientAccountRequest,
    RegisterClientAccountUseCase,
    UpdateCompanyDataRequest,
    UpdateCompanyDataUseCase,
)
from onboard.config import Settings
from onboard.domain.value import AccountType, InvitationKind
from onboard.interface.api.session import set_session_cookie
from onboard.interface.error import unwrap

router = APIRouter(prefix="/onboarding", tags=["onboarding"], route_class=DishkaRoute)


class AccountAPIRequest(BaseModel):
    name: str
    password: str


class AccountAPIResponse(BaseModel):
    """Account created or linked; the session is in the cookie."""

    account_id: str
    email: str
    account_type: AccountType
    company_id: str
    is_new: bool


class CompanyDataAPIRequest(BaseModel):
    legal_name: str | None = None
    tax_id: str | None = None
    fiscal_address: str | None = None


class TermsAPIRequest(BaseModel):
    contact_name: str | None = None


@router.get("/{token}", response_model=GetInvitationStateResponse)
async def get_onboarding_state(
    token: str,
    use_case: FromDishka[GetInvitationStateUseCase],
) -> GetInvitationStateResponse:
    """Landing page data: valid, expired, used, revoked or not_found."""
    return await use_case.execute(
        GetInvitationStateRequest(token=token, kind=InvitationKind.CLIENT_PORTAL)
    )


@router.post("/{token}/account", response_model=AccountAPIResponse)
async def register_account(
    token: str,
    request: AccountAPIRequest,
    response: Response,
    use_case: FromDishka[RegisterClientAccountUseCase],
    settings: FromDishka[Settings],
) -> AccountAPIResponse:
    """Create or link the portal account and sign it in.

    Sets cookie: auth_token
    """
    result = unwrap(
        await use_case.execute(
            RegisterClientAccountRequest(
                token=token, name=request.name, password=request.password
            )
        )
    )
    set_session_cookie(response, result.session_token, settings)
    return AccountAPIResponse(
        account_id=result.account_id,
        email=result.email,
        account_type=result.account_type,
        company_id=result.company_id,
        is_new=result.is_new,
    )


@router.put("/{token}/company", response_model=CompanyView)
async def update_company(
    token: str,
    request: CompanyDataAPIRequest,
    use_case: FromDishka[UpdateCompanyDataUseCase],
) -> CompanyView:
    """Save any subset of the company's legal data."""
    return unwrap(
        await use_case.execute(
            UpdateCompanyDataRequest(token=token, **request.model_dump())
        )
    )


@router.post("/{token}/terms", response_model=AcceptTermsResponse)
async def accept_terms(
    token: str,
    request: TermsAPIRequest,
    use_case: FromDishka[AcceptTermsUseCase],
) -> AcceptTermsResponse:
    """Accept the terms and close the invitation."""
    return unwrap(
        await use_case.execute(
            AcceptTermsRequest(token=token, contact_name=request.contact_name)
        )
    )

"""Client portal routes for signed-in client accounts."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response
from pydantic import BaseModel

from onboard.application.usecase.auth import LoginUseCase
from onboard.application.usecase.common import CompanyView
from onboard.application.usecase.onboarding import (
    AcceptTermsRequest,
    AcceptTermsResponse,
    AcceptTermsUseCase,
    GetPortalCompanyRequest,
    GetPortalCompanyUseCase,
    UpdateCompanyDataRequest,
    UpdateCompanyDataUseCase,
)
from onboard.config import Settings
from onboard.domain.service import JWTService
from onboard.domain.value import AccountType
from onboard.interface.api.routes.auth import (
    LoginAPIRequest,
    SessionAPIResponse,
    start_session,
)
from onboard.interface.api.session import require_session
from onboard.interface.error import unwrap

router = APIRouter(prefix="/portal", tags=["portal"], route_class=DishkaRoute)


class CompanyDataAPIRequest(BaseModel):
    legal_name: str | None = None
    tax_id: str | None = None
    fiscal_address: str | None = None


class TermsAPIRequest(BaseModel):
    contact_name: str | None = None


@router.post("/login", response_model=SessionAPIResponse)
async def login(
    request: LoginAPIRequest,
    response: Response,
    use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> SessionAPIResponse:
    """Client sign-in after onboarding.

    Sets cookie: auth_token
    """
    return await start_session(
        request, AccountType.CLIENT, response, use_case, settings
    )


@router.get("/company", response_model=CompanyView)
async def get_company(
    use_case: FromDishka[GetPortalCompanyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CompanyView:
    payload = require_session(jwt_service, auth_token)
    return unwrap(
        await use_case.execute(GetPortalCompanyRequest(account_id=payload.account_id))
    )


@router.put("/company", response_model=CompanyView)
async def update_company(
    request: CompanyDataAPIRequest,
    use_case: FromDishka[UpdateCompanyDataUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CompanyView:
    payload = require_session(jwt_service, auth_token)
    return unwrap(
        await use_case.execute(
            UpdateCompanyDataRequest(
                account_id=payload.account_id, **request.model_dump()
            )
        )
    )


@router.post("/company/terms", response_model=AcceptTermsResponse)
async def accept_terms(
    request: TermsAPIRequest,
    use_case: FromDishka[AcceptTermsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AcceptTermsResponse:
    """Accept the terms without an invitation link."""
    payload = require_session(jwt_service, auth_token)
    return unwrap(
        await use_case.execute(
            AcceptTermsRequest(
                account_id=payload.account_id, contact_name=request.contact_name
            )
        )
    )

"""Password sign-in routes for staff and portal accounts."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from onboard.application.usecase.auth import LoginRequest, LoginUseCase
from onboard.config import Settings
from onboard.domain.value import AccountType, Err, ErrorKind
from onboard.interface.api.session import clear_session_cookie, set_session_cookie
from onboard.interface.error import InterfaceError, unwrap

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LoginAPIRequest(BaseModel):
    email: str
    password: str


class SessionAPIResponse(BaseModel):
    account_id: str
    email: str
    name: str
    account_type: AccountType


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


async def start_session(
    request: LoginAPIRequest,
    account_type: AccountType,
    response: Response,
    use_case: LoginUseCase,
    settings: Settings,
) -> SessionAPIResponse:
    """Sign in an account of the given type and set the session cookie.

    Raises:
        InterfaceError: 401 on bad credentials, 422 on a malformed email
    """
    result = await use_case.execute(
        LoginRequest(
            email=request.email,
            password=request.password,
            account_type=account_type,
        )
    )
    if isinstance(result, Err) and result.kind == ErrorKind.UNAUTHORIZED:
        raise InterfaceError(result, status.HTTP_401_UNAUTHORIZED)

    login = unwrap(result)
    set_session_cookie(response, login.session_token, settings)
    return SessionAPIResponse(
        account_id=login.account_id,
        email=login.email,
        name=login.name,
        account_type=login.account_type,
    )


@router.post("/login", response_model=SessionAPIResponse)
async def login(
    request: LoginAPIRequest,
    response: Response,
    use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> SessionAPIResponse:
    """Staff sign-in.

    Sets cookie: auth_token
    """
    return await start_session(
        request, AccountType.INTERNAL, response, use_case, settings
    )


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Logout by clearing the session cookie."""
    clear_session_cookie(response, settings)
    return LogoutResponse(success=True, message="Successfully logged out")

"""Login use case."""

import logfire
from pydantic import BaseModel

from onboard.application.usecase.base import BaseUseCase
from onboard.domain.repository import AccountRepository
from onboard.domain.service import CredentialHasher, JWTService
from onboard.domain.value import (
    AccountType,
    Err,
    ErrorKind,
    Ok,
    Result,
    normalize_email,
)


class LoginRequest(BaseModel):
    """Password sign-in on one of the two surfaces.

    Staff sign in on the back office, clients on the portal; the surface
    decides which account type is accepted.
    """

    email: str
    password: str
    account_type: AccountType


class LoginResponse(BaseModel):
    """Login response."""

    account_id: str
    email: str
    name: str
    account_type: AccountType
    session_token: str


class LoginUseCase(BaseUseCase):
    """Use case for returning users signing in with email and password."""

    def __init__(
        self,
        account_repository: AccountRepository,
        credential_hasher: CredentialHasher,
        jwt_service: JWTService,
    ) -> None:
        """Initialize login use case.

        Args:
            account_repository: Account lookups by email
            credential_hasher: Password verification
            jwt_service: Issues the session token
        """
        self.account_repository = account_repository
        self.credential_hasher = credential_hasher
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> Result[LoginResponse]:
        """Check the credentials and open a session.

        Unknown emails, wrong passwords, accounts without a password and
        accounts of the other type all get the same error.

        Returns:
            Ok with the account and a session token, Err(UNAUTHORIZED) if the
            credentials do not match an account of the requested type
        """
        with logfire.span("login.execute", account_type=request.account_type.value):
            try:
                email = normalize_email(request.email)
            except ValueError:
                return Err(ErrorKind.INVALID_INPUT, "Invalid email address")

            account = await self.account_repository.find_by_email(email)
            if not (
                account
                and account.password_hash
                and account.account_type == request.account_type
                and self.credential_hasher.verify(
                    request.password, account.password_hash
                )
            ):
                logfire.warn(
                    "Login rejected",
                    account_type=request.account_type.value,
                    known_email=account is not None,
                )
                return Err(ErrorKind.UNAUTHORIZED, "Invalid email or password")

            logfire.info(
                "Account logged in",
                account_id=str(account.id),
                account_type=account.account_type.value,
            )
            return Ok(
                LoginResponse(
                    account_id=str(account.id),
                    email=account.email,
                    name=account.name,
                    account_type=account.account_type,
                    session_token=self.jwt_service.create_token(account),
                )
            )

"""Register client account use case."""

import logfire
from pydantic import BaseModel

from onboard.application.usecase.base import BaseUseCase
from onboard.application.usecase.onboarding.access import pending_invitation
from onboard.domain.service import (
    AccountLinker,
    InvitationService,
    JWTService,
)
from onboard.domain.value import (
    AccountType,
    Err,
    ErrorKind,
    InvitationKind,
    Ok,
    Result,
)


class RegisterClientAccountRequest(BaseModel):
    """Account details submitted on the onboarding page."""

    token: str
    name: str
    password: str


class RegisterClientAccountResponse(BaseModel):
    account_id: str
    email: str
    account_type: AccountType
    company_id: str
    is_new: bool
    session_token: str


class RegisterClientAccountUseCase(BaseUseCase):
    """First onboarding step: create or link the portal account.

    The invitation stays PENDING; it is consumed when the terms are accepted,
    so the link keeps working until onboarding is finished.
    """

    def __init__(
        self,
        invitation_service: InvitationService,
        account_linker: AccountLinker,
        jwt_service: JWTService,
        min_password_length: int,
    ) -> None:
        """Initialize use case.

        Args:
            invitation_service: Resolves the link
            account_linker: Creates or links the account (checks the password
                of an existing one)
            jwt_service: Issues the portal session
            min_password_length: Minimum accepted password length
        """
        self.invitation_service = invitation_service
        self.account_linker = account_linker
        self.jwt_service = jwt_service
        self.min_password_length = min_password_length

    async def execute(
        self, request: RegisterClientAccountRequest
    ) -> Result[RegisterClientAccountResponse]:
        with logfire.span(
            "register_client_account.execute", token=request.token[:8] + "..."
        ):
            invitation = await pending_invitation(
                self.invitation_service, request.token, InvitationKind.CLIENT_PORTAL
            )
            if isinstance(invitation, Err):
                return invitation

            if len(request.password) < self.min_password_length:
                return Err(
                    ErrorKind.INVALID_INPUT,
                    f"Password must be at least {self.min_password_length} characters",
                )

            linked = await self.account_linker.resolve_account(
                invitation.value, request.name, request.password
            )
            if isinstance(linked, Err):
                return linked

            account = linked.value.account

            logfire.info(
                "Client account ready",
                account_id=str(account.id),
                is_new=linked.value.is_new,
            )
            return Ok(
                RegisterClientAccountResponse(
                    account_id=str(account.id),
                    email=account.email,
                    account_type=account.account_type,
                    company_id=str(invitation.value.company_id),
                    is_new=linked.value.is_new,
                    session_token=self.jwt_service.create_token(account),
                )
            )

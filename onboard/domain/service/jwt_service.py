"""Session token domain service."""

import logfire

from onboard.config import AuthSettings
from onboard.domain.model.account import UserAccount
from onboard.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Issues and verifies session tokens for portal and staff accounts."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, account: UserAccount) -> str:
        """Create a session token for an account."""
        with logfire.span("jwt_service.create_token", account_id=str(account.id)):
            token = create_token(
                str(account.id),
                account.email,
                account.account_type.value,
                self.auth_settings,
            )
            logfire.info("JWT token created", account_id=str(account.id))
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a session token and extract its payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
            logfire.info("JWT token verified", account_id=payload.account_id)
            return payload

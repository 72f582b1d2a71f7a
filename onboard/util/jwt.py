"""JWT session token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from onboard.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    account_id: str
    email: str
    account_type: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    account_id: str, email: str, account_type: str, settings: AuthSettings
) -> str:
    """Create a session JWT for an account.

    Args:
        account_id: Account ID
        email: Account email
        account_type: "client" or "internal"
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "account_id": account_id,
        "email": email,
        "account_type": account_type,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a session JWT.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

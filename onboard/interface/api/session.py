"""Session cookie helpers shared by the routers."""

from fastapi import HTTPException, Response, status

from onboard.config import Settings
from onboard.domain.service import JWTService
from onboard.util.jwt import JWTError, TokenPayload


def require_session(jwt_service: JWTService, auth_token: str | None) -> TokenPayload:
    """Verify the session cookie.

    Raises:
        HTTPException: 401 if the cookie is missing or invalid
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        return jwt_service.verify_token(auth_token)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Set the HTTP-only session cookie."""
    is_production = settings.environment == "production"
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=token,
        httponly=True,
        secure=is_production,
        samesite="lax",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    """Delete the session cookie set by set_session_cookie."""
    response.delete_cookie(key=settings.auth.cookie_name, path="/")

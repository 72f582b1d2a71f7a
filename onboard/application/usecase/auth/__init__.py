"""Authentication use cases."""

from onboard.application.usecase.auth.login import (
    LoginRequest,
    LoginResponse,
    LoginUseCase,
)

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
]

"""Domain services."""

from .account_linker import AccountLinker, LinkedAccount
from .base import Service
from .clock import Clock, FrozenClock, SystemClock
from .credential import CredentialHasher
from .invitation_service import InvitationService, status_error
from .jwt_service import JWTService
from .notification import (
    NotificationDispatcher,
    invitation_link,
    render_invitation_email,
)
from .onboarding_gate import AcceptanceOutcome, OnboardingGate
from .token_generator import TokenGenerator

__all__ = [
    "AcceptanceOutcome",
    "AccountLinker",
    "Clock",
    "CredentialHasher",
    "FrozenClock",
    "InvitationService",
    "JWTService",
    "LinkedAccount",
    "NotificationDispatcher",
    "OnboardingGate",
    "Service",
    "SystemClock",
    "TokenGenerator",
    "invitation_link",
    "render_invitation_email",
    "status_error",
]

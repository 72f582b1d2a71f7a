"""Invitation token generation."""

import secrets

from onboard.domain.value import InvitationToken

MIN_TOKEN_BYTES = 16  # 128 bits


class TokenGenerator:
    """Produces opaque, URL-safe invitation tokens.

    Tokens are pure randomness: no timestamp, ID or counter is embedded, so
    they cannot be guessed or enumerated. Uniqueness is statistical here and
    enforced by the repository's unique constraint; callers retry on the
    (astronomically rare) collision.
    """

    def __init__(self, num_bytes: int = 32) -> None:
        if num_bytes < MIN_TOKEN_BYTES:
            raise ValueError(
                f"Tokens need at least {MIN_TOKEN_BYTES} random bytes, got {num_bytes}"
            )
        self.num_bytes = num_bytes

    def generate(self) -> InvitationToken:
        return InvitationToken(secrets.token_urlsafe(self.num_bytes))

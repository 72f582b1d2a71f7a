"""Adapter DI providers."""

from dishka import Scope, provide

from onboard.adapter.password import Argon2CredentialHasher
from onboard.domain.service import CredentialHasher
from onboard.util.di.base import ProviderBase


class ProdAdapterProvider(ProviderBase):
    """Stateless adapters shared by the whole application."""

    scope = Scope.APP

    @provide
    def get_credential_hasher(self) -> CredentialHasher:
        """Provide argon2 password hashing."""
        return Argon2CredentialHasher()

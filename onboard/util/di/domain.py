"""Domain layer DI providers."""

from dishka import Scope, provide

from onboard.config import (
    AuthSettings,
    InvitationSettings,
    OnboardingSettings,
    Settings,
)
from onboard.domain.repository import (
    AccountRepository,
    CompanyRepository,
    ContactRepository,
    InvitationRepository,
    UnitOfWork,
)
from onboard.domain.service import (
    AccountLinker,
    Clock,
    CredentialHasher,
    InvitationService,
    JWTService,
    NotificationDispatcher,
    OnboardingGate,
    TokenGenerator,
)
from onboard.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_token_generator(self, settings: InvitationSettings) -> TokenGenerator:
        """Provide the invitation token generator."""
        return TokenGenerator(num_bytes=settings.token_bytes)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_invitation_service(
        self,
        invitation_repository: InvitationRepository,
        token_generator: TokenGenerator,
        notification_dispatcher: NotificationDispatcher,
        unit_of_work: UnitOfWork,
        clock: Clock,
        settings: Settings,
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(
            invitation_repository=invitation_repository,
            token_generator=token_generator,
            notification_dispatcher=notification_dispatcher,
            unit_of_work=unit_of_work,
            clock=clock,
            settings=settings.invitations,
            frontend_url=settings.api.frontend_url,
        )

    @provide
    def get_account_linker(
        self,
        account_repository: AccountRepository,
        contact_repository: ContactRepository,
        credential_hasher: CredentialHasher,
        clock: Clock,
    ) -> AccountLinker:
        """Provide account linking domain service."""
        return AccountLinker(
            account_repository=account_repository,
            contact_repository=contact_repository,
            credential_hasher=credential_hasher,
            clock=clock,
        )

    @provide
    def get_onboarding_gate(
        self,
        company_repository: CompanyRepository,
        invitation_service: InvitationService,
        clock: Clock,
        settings: OnboardingSettings,
    ) -> OnboardingGate:
        """Provide onboarding gate domain service."""
        return OnboardingGate(
            company_repository=company_repository,
            invitation_service=invitation_service,
            clock=clock,
            terms_version=settings.terms_version,
        )

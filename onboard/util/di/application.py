"""Application layer DI providers."""

from dishka import Scope, provide

from onboard.application.usecase.auth import LoginUseCase
from onboard.application.usecase.invitation import (
    GetInvitationStateUseCase,
    IssueClientInvitationUseCase,
    IssueTeamInvitationUseCase,
    ListCompanyInvitationsUseCase,
    ListWorkspaceInvitationsUseCase,
    RevokeInvitationUseCase,
)
from onboard.application.usecase.onboarding import (
    AcceptTermsUseCase,
    GetPortalCompanyUseCase,
    RegisterClientAccountUseCase,
    UpdateCompanyDataUseCase,
)
from onboard.application.usecase.team import AcceptTeamInvitationUseCase
from onboard.config import Settings
from onboard.domain.repository import (
    AccountRepository,
    CompanyRepository,
    ContactRepository,
    WorkspaceRepository,
)
from onboard.domain.service import (
    AccountLinker,
    Clock,
    CredentialHasher,
    InvitationService,
    JWTService,
    OnboardingGate,
)
from onboard.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_login_use_case(
        self,
        account_repository: AccountRepository,
        credential_hasher: CredentialHasher,
        jwt_service: JWTService,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            account_repository=account_repository,
            credential_hasher=credential_hasher,
            jwt_service=jwt_service,
        )

    # Invitation use cases
    @provide
    def get_issue_client_invitation_use_case(
        self,
        invitation_service: InvitationService,
        account_repository: AccountRepository,
        company_repository: CompanyRepository,
        contact_repository: ContactRepository,
        settings: Settings,
    ) -> IssueClientInvitationUseCase:
        """Provide issue client invitation use case."""
        return IssueClientInvitationUseCase(
            invitation_service=invitation_service,
            account_repository=account_repository,
            company_repository=company_repository,
            contact_repository=contact_repository,
            frontend_url=settings.api.frontend_url,
        )

    @provide
    def get_issue_team_invitation_use_case(
        self,
        invitation_service: InvitationService,
        account_repository: AccountRepository,
        workspace_repository: WorkspaceRepository,
        settings: Settings,
    ) -> IssueTeamInvitationUseCase:
        """Provide issue team invitation use case."""
        return IssueTeamInvitationUseCase(
            invitation_service=invitation_service,
            account_repository=account_repository,
            workspace_repository=workspace_repository,
            max_workspace_members=settings.invitations.max_workspace_members,
            frontend_url=settings.api.frontend_url,
        )

    @provide
    def get_invitation_state_use_case(
        self,
        invitation_service: InvitationService,
        company_repository: CompanyRepository,
        contact_repository: ContactRepository,
        workspace_repository: WorkspaceRepository,
    ) -> GetInvitationStateUseCase:
        """Provide get invitation state use case."""
        return GetInvitationStateUseCase(
            invitation_service=invitation_service,
            company_repository=company_repository,
            contact_repository=contact_repository,
            workspace_repository=workspace_repository,
        )

    @provide
    def get_revoke_invitation_use_case(
        self,
        invitation_service: InvitationService,
        account_repository: AccountRepository,
        settings: Settings,
    ) -> RevokeInvitationUseCase:
        """Provide revoke invitation use case."""
        return RevokeInvitationUseCase(
            invitation_service=invitation_service,
            account_repository=account_repository,
            frontend_url=settings.api.frontend_url,
        )

    @provide
    def get_list_company_invitations_use_case(
        self,
        invitation_service: InvitationService,
        account_repository: AccountRepository,
        company_repository: CompanyRepository,
        settings: Settings,
    ) -> ListCompanyInvitationsUseCase:
        """Provide list company invitations use case."""
        return ListCompanyInvitationsUseCase(
            invitation_service=invitation_service,
            account_repository=account_repository,
            company_repository=company_repository,
            frontend_url=settings.api.frontend_url,
        )

    @provide
    def get_list_workspace_invitations_use_case(
        self,
        invitation_service: InvitationService,
        account_repository: AccountRepository,
        workspace_repository: WorkspaceRepository,
        settings: Settings,
    ) -> ListWorkspaceInvitationsUseCase:
        """Provide list workspace invitations use case."""
        return ListWorkspaceInvitationsUseCase(
            invitation_service=invitation_service,
            account_repository=account_repository,
            workspace_repository=workspace_repository,
            frontend_url=settings.api.frontend_url,
        )

    # Onboarding use cases

    @provide
    def get_register_client_account_use_case(
        self,
        invitation_service: InvitationService,
        account_linker: AccountLinker,
        jwt_service: JWTService,
        settings: Settings,
    ) -> RegisterClientAccountUseCase:
        """Provide register client account use case."""
        return RegisterClientAccountUseCase(
            invitation_service=invitation_service,
            account_linker=account_linker,
            jwt_service=jwt_service,
            min_password_length=settings.onboarding.min_password_length,
        )

    @provide
    def get_update_company_data_use_case(
        self,
        onboarding_gate: OnboardingGate,
        invitation_service: InvitationService,
        account_repository: AccountRepository,
        contact_repository: ContactRepository,
    ) -> UpdateCompanyDataUseCase:
        """Provide update company data use case."""
        return UpdateCompanyDataUseCase(
            onboarding_gate=onboarding_gate,
            invitation_service=invitation_service,
            account_repository=account_repository,
            contact_repository=contact_repository,
        )

    @provide
    def get_accept_terms_use_case(
        self,
        onboarding_gate: OnboardingGate,
        invitation_service: InvitationService,
        account_repository: AccountRepository,
        contact_repository: ContactRepository,
    ) -> AcceptTermsUseCase:
        """Provide accept terms use case."""
        return AcceptTermsUseCase(
            onboarding_gate=onboarding_gate,
            invitation_service=invitation_service,
            account_repository=account_repository,
            contact_repository=contact_repository,
        )

    @provide
    def get_portal_company_use_case(
        self,
        account_repository: AccountRepository,
        contact_repository: ContactRepository,
        company_repository: CompanyRepository,
    ) -> GetPortalCompanyUseCase:
        """Provide get portal company use case."""
        return GetPortalCompanyUseCase(
            account_repository=account_repository,
            contact_repository=contact_repository,
            company_repository=company_repository,
        )

    # Team use cases
    @provide
    def get_accept_team_invitation_use_case(
        self,
        invitation_service: InvitationService,
        account_linker: AccountLinker,
        workspace_repository: WorkspaceRepository,
        jwt_service: JWTService,
        clock: Clock,
        settings: Settings,
    ) -> AcceptTeamInvitationUseCase:
        """Provide accept team invitation use case."""
        return AcceptTeamInvitationUseCase(
            invitation_service=invitation_service,
            account_linker=account_linker,
            workspace_repository=workspace_repository,
            jwt_service=jwt_service,
            clock=clock,
            min_password_length=settings.onboarding.min_password_length,
            max_workspace_members=settings.invitations.max_workspace_members,
        )

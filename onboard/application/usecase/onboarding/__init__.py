"""Client onboarding use cases."""

from onboard.application.usecase.onboarding.accept_terms import (
    AcceptTermsRequest,
    AcceptTermsResponse,
    AcceptTermsUseCase,
)
from onboard.application.usecase.onboarding.get_portal_company import (
    GetPortalCompanyRequest,
    GetPortalCompanyUseCase,
)
from onboard.application.usecase.onboarding.register_client_account import (
    RegisterClientAccountRequest,
    RegisterClientAccountResponse,
    RegisterClientAccountUseCase,
)
from onboard.application.usecase.onboarding.update_company_data import (
    UpdateCompanyDataRequest,
    UpdateCompanyDataUseCase,
)

__all__ = [
    "AcceptTermsRequest",
    "AcceptTermsResponse",
    "AcceptTermsUseCase",
    "GetPortalCompanyRequest",
    "GetPortalCompanyUseCase",
    "RegisterClientAccountRequest",
    "RegisterClientAccountResponse",
    "RegisterClientAccountUseCase",
    "UpdateCompanyDataRequest",
    "UpdateCompanyDataUseCase",
]

"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the invitation and onboarding rules that span
    several entities; they return ``Ok``/``Err`` values instead of raising
    for business outcomes.
    """

    pass

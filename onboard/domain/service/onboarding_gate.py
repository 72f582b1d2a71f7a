"""Onboarding gate domain service."""

from typing import Optional

import logfire

from onboard.domain.model.company import Company
from onboard.domain.model.invitation import Invitation
from onboard.domain.repository import CompanyRepository
from onboard.domain.value import (
    CompanyData,
    CompanyId,
    ContactId,
    Err,
    ErrorKind,
    InvitationToken,
    Ok,
    Result,
    TermsAcceptance,
)
from onboard.domain.value.common import ValueObject

from .base import Service
from .clock import Clock
from .invitation_service import InvitationService


class AcceptanceOutcome(ValueObject):
    """Result of a successful terms acceptance."""

    company: Company
    invitation: Optional[Invitation] = None

    @property
    def invitation_consumed(self) -> bool:
        return self.invitation is not None


class OnboardingGate(Service):
    """Two-phase completion rule on a client company.

    DATA_INCOMPLETE -> DATA_COMPLETE -> ACCEPTED (terminal). Data can be
    edited freely until the terms are accepted and never afterwards; the
    terms can be accepted once, and only with complete data.
    """

    def __init__(
        self,
        company_repository: CompanyRepository,
        invitation_service: InvitationService,
        clock: Clock,
        terms_version: str,
    ) -> None:
        """Initialize onboarding gate.

        Args:
            company_repository: Company repository
            invitation_service: Consumes the invitation on acceptance
            clock: Time source
            terms_version: Version stamped on acceptances
        """
        self.company_repository = company_repository
        self.invitation_service = invitation_service
        self.clock = clock
        self.terms_version = terms_version

    async def update_target_data(
        self, company_id: CompanyId, data: CompanyData
    ) -> Result[Company]:
        """Save any subset of the required company fields.

        Args:
            company_id: Company being onboarded
            data: Fields to write; omitted fields are untouched

        Returns:
            Ok with the updated company, Err(ALREADY_ACCEPTED) once the terms
            are accepted
        """
        fields = data.provided_fields()
        with logfire.span(
            "onboarding_gate.update_target_data",
            company_id=str(company_id),
            fields=sorted(fields),
        ):
            if not fields:
                return Err(ErrorKind.INVALID_INPUT, "No company data provided")

            updated = await self.company_repository.update_fields(
                company_id, fields, self.clock.now()
            )
            if updated:
                logfire.info(
                    "Company data updated",
                    company_id=str(company_id),
                    onboarding_state=updated.onboarding_state.value,
                )
                return Ok(updated)

            company = await self.company_repository.find_by_id(company_id)
            if company is None:
                return Err(ErrorKind.NOT_FOUND, "Company not found")

            logfire.warn(
                "Company data change after acceptance rejected",
                company_id=str(company_id),
            )
            return Err(
                ErrorKind.ALREADY_ACCEPTED,
                "Company data cannot change after the terms were accepted",
            )

    async def accept(
        self,
        company_id: CompanyId,
        contact_id: ContactId,
        contact_name: str,
        token: Optional[str | InvitationToken] = None,
    ) -> Result[AcceptanceOutcome]:
        """Record the terms acceptance and consume the invitation.

        Not idempotent: a second acceptance is an error because acceptance
        is a one-time legal event.

        Args:
            company_id: Company accepting the terms
            contact_id: Contact accepting on behalf of the company
            contact_name: Name recorded with the acceptance
            token: Invitation used for onboarding, if any

        Returns:
            Ok with the accepted company and the consumed invitation (None if
            no token was given or it could not be consumed)
        """
        with logfire.span(
            "onboarding_gate.accept",
            company_id=str(company_id),
            contact_id=str(contact_id),
            with_token=token is not None,
        ):
            company = await self.company_repository.find_by_id(company_id)
            if company is None:
                return Err(ErrorKind.NOT_FOUND, "Company not found")

            rejection = self._rejection(company)
            if rejection:
                return rejection

            if not contact_name.strip():
                return Err(ErrorKind.INVALID_INPUT, "Contact name is required")

            acceptance = TermsAcceptance(
                accepted_at=self.clock.now(),
                accepted_by_id=contact_id,
                accepted_by_name=contact_name.strip(),
                version=self.terms_version,
            )
            accepted = await self.company_repository.record_acceptance(
                company_id, acceptance
            )
            if accepted is None:
                # Guard failed: accepted or emptied concurrently
                current = await self.company_repository.find_by_id(company_id)
                if current is None:
                    return Err(ErrorKind.NOT_FOUND, "Company not found")
                return self._rejection(current) or Err(
                    ErrorKind.ALREADY_ACCEPTED, "The terms were already accepted"
                )

            logfire.info(
                "Terms accepted",
                company_id=str(company_id),
                contact_id=str(contact_id),
                terms_version=self.terms_version,
            )

            invitation = None
            if token is not None:
                consumed = await self.invitation_service.consume(
                    token, company_id=company_id
                )
                if isinstance(consumed, Ok):
                    invitation = consumed.value
                else:
                    # Acceptance stands; the invitation keeps its own state
                    logfire.warn(
                        "Invitation left unconsumed after acceptance",
                        company_id=str(company_id),
                        reason=consumed.kind.value,
                    )

            return Ok(AcceptanceOutcome(company=accepted, invitation=invitation))

    @staticmethod
    def _rejection(company: Company) -> Optional[Err]:
        if company.terms_accepted:
            logfire.warn("Terms already accepted", company_id=str(company.id))
            return Err(ErrorKind.ALREADY_ACCEPTED, "The terms were already accepted")

        missing = company.missing_fields
        if missing:
            logfire.warn(
                "Acceptance with incomplete data rejected",
                company_id=str(company.id),
                missing=missing,
            )
            return Err(
                ErrorKind.INCOMPLETE_DATA,
                "All company data must be completed before accepting the terms",
                {"missing_fields": missing},
            )
        return None

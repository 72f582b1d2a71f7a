"""Unit tests for OnboardingGate."""

import pytest

from onboard.config import OnboardingSettings
from onboard.domain.repository import CompanyRepository
from onboard.domain.service import FrozenClock, InvitationService, OnboardingGate
from onboard.domain.value import (
    CompanyData,
    ErrorKind,
    InvitationNotice,
    InvitationStatus,
    InvitationTarget,
    OnboardingState,
)
from onboard.persistence.repository.inmemory import InMemoryStore
from tests.conftest import COMPLETE_DATA, make_company, make_contact
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _onboarding(env, **company_fields):
    """Seed a company and contact and send the portal invitation."""
    store = await env.get(InMemoryStore)
    service = await env.get(InvitationService)
    company = make_company(store, **company_fields)
    contact = make_contact(store, company)
    issued = await service.issue(
        InvitationTarget.client(company.id, contact.id),
        InvitationNotice(
            to=contact.email, recipient_name=contact.full_name, organisation_name="Acme"
        ),
    )
    return company, contact, issued.value


class TestUpdateTargetData:
    """Tests for update_target_data method."""

    @pytest.mark.asyncio
    async def test_fields_can_be_saved_one_at_a_time(self, unit_env):
        gate = await unit_env.get(OnboardingGate)
        company, _, _ = await _onboarding(unit_env)

        first = await gate.update_target_data(company.id, CompanyData(tax_id="B1"))
        second = await gate.update_target_data(
            company.id, CompanyData(legal_name=" Acme Holdings S.L. ")
        )

        assert first.value.onboarding_state == OnboardingState.DATA_INCOMPLETE
        assert second.value.tax_id == "B1"
        assert second.value.legal_name == "Acme Holdings S.L."
        assert second.value.missing_fields == ["fiscal_address"]

    @pytest.mark.asyncio
    async def test_completing_data_moves_to_data_complete(self, unit_env):
        gate = await unit_env.get(OnboardingGate)
        company, _, _ = await _onboarding(unit_env)

        result = await gate.update_target_data(company.id, CompanyData(**COMPLETE_DATA))

        assert result.value.onboarding_state == OnboardingState.DATA_COMPLETE

    @pytest.mark.asyncio
    async def test_empty_update_is_rejected(self, unit_env):
        gate = await unit_env.get(OnboardingGate)
        company, _, _ = await _onboarding(unit_env)

        result = await gate.update_target_data(company.id, CompanyData())

        assert result.kind == ErrorKind.INVALID_INPUT

    @pytest.mark.asyncio
    async def test_update_after_acceptance_is_rejected(self, unit_env):
        """Accepted data is frozen."""
        gate = await unit_env.get(OnboardingGate)
        company, contact, invitation = await _onboarding(unit_env, **COMPLETE_DATA)
        await gate.accept(company.id, contact.id, contact.full_name, invitation.token)

        result = await gate.update_target_data(company.id, CompanyData(tax_id="B2"))

        assert result.kind == ErrorKind.ALREADY_ACCEPTED
        stored = await (await unit_env.get(CompanyRepository)).find_by_id(company.id)
        assert stored.tax_id == COMPLETE_DATA["tax_id"]


class TestAccept:
    """Tests for accept method."""

    @pytest.mark.asyncio
    async def test_accept_with_incomplete_data(self, unit_env):
        gate = await unit_env.get(OnboardingGate)
        company, contact, invitation = await _onboarding(unit_env, tax_id="B1")

        result = await gate.accept(
            company.id, contact.id, contact.full_name, invitation.token
        )

        assert result.kind == ErrorKind.INCOMPLETE_DATA
        assert result.details["missing_fields"] == ["legal_name", "fiscal_address"]

    @pytest.mark.asyncio
    async def test_blank_field_counts_as_missing(self, unit_env):
        gate = await unit_env.get(OnboardingGate)
        company, contact, invitation = await _onboarding(
            unit_env, **{**COMPLETE_DATA, "fiscal_address": "   "}
        )

        result = await gate.accept(
            company.id, contact.id, contact.full_name, invitation.token
        )

        assert result.kind == ErrorKind.INCOMPLETE_DATA

    @pytest.mark.asyncio
    async def test_accept_records_acceptance_and_consumes_invitation(self, unit_env):
        gate = await unit_env.get(OnboardingGate)
        clock = await unit_env.get(FrozenClock)
        company, contact, invitation = await _onboarding(unit_env, **COMPLETE_DATA)

        result = await gate.accept(
            company.id, contact.id, "Ana G.", invitation.token
        )

        assert result.ok
        accepted = result.value.company
        assert accepted.terms_accepted
        assert accepted.terms_accepted_at == clock.now()
        assert accepted.terms_accepted_by_id == contact.id
        assert accepted.terms_accepted_by_name == "Ana G."
        assert accepted.terms_version == OnboardingSettings().terms_version
        assert accepted.onboarding_state == OnboardingState.ACCEPTED
        assert result.value.invitation_consumed
        assert result.value.invitation.status == InvitationStatus.ACCEPTED

    @pytest.mark.asyncio
    async def test_accept_twice_is_rejected(self, unit_env):
        """Acceptance is a one-time legal event."""
        gate = await unit_env.get(OnboardingGate)
        company, contact, invitation = await _onboarding(unit_env, **COMPLETE_DATA)
        await gate.accept(company.id, contact.id, contact.full_name, invitation.token)

        again = await gate.accept(company.id, contact.id, contact.full_name)

        assert again.kind == ErrorKind.ALREADY_ACCEPTED

    @pytest.mark.asyncio
    async def test_accept_without_token_leaves_invitation_pending(self, unit_env):
        gate = await unit_env.get(OnboardingGate)
        service = await unit_env.get(InvitationService)
        company, contact, invitation = await _onboarding(unit_env, **COMPLETE_DATA)

        result = await gate.accept(company.id, contact.id, contact.full_name)

        assert result.ok
        assert not result.value.invitation_consumed
        resolved = await service.resolve(invitation.token)
        assert resolved.value.status == InvitationStatus.PENDING

    @pytest.mark.asyncio
    async def test_acceptance_stands_when_invitation_expired_meanwhile(self, unit_env):
        """The company is accepted even if the link lapsed during the request."""
        gate = await unit_env.get(OnboardingGate)
        clock = await unit_env.get(FrozenClock)
        company, contact, invitation = await _onboarding(unit_env, **COMPLETE_DATA)
        clock.advance(days=8)

        result = await gate.accept(
            company.id, contact.id, contact.full_name, invitation.token
        )

        assert result.value.company.terms_accepted
        assert not result.value.invitation_consumed

    @pytest.mark.asyncio
    async def test_blank_contact_name(self, unit_env):
        gate = await unit_env.get(OnboardingGate)
        company, contact, _ = await _onboarding(unit_env, **COMPLETE_DATA)

        result = await gate.accept(company.id, contact.id, "  ")

        assert result.kind == ErrorKind.INVALID_INPUT

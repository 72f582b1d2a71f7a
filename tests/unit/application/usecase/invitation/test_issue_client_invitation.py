"""Unit tests for IssueClientInvitationUseCase."""

from uuid import uuid4

import pytest

from onboard.adapter.email.recording import RecordingNotificationDispatcher
from onboard.application.usecase.invitation import (
    IssueClientInvitationRequest,
    IssueClientInvitationUseCase,
)
from onboard.domain.value import AccountType, ErrorKind, InvitationStatus
from onboard.persistence.repository.inmemory import InMemoryStore
from tests.conftest import make_account, make_company, make_contact
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestIssueClientInvitationUseCase:
    """Tests for IssueClientInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_staff_invites_contact(self, unit_env):
        # Arrange
        use_case = await unit_env.get(IssueClientInvitationUseCase)
        dispatcher = await unit_env.get(RecordingNotificationDispatcher)
        store = await unit_env.get(InMemoryStore)
        staff = make_account(store)
        company = make_company(store)
        contact = make_contact(store, company)

        # Act
        result = await use_case.execute(
            IssueClientInvitationRequest(
                actor_id=str(staff.id),
                company_id=str(company.id),
                contact_id=str(contact.id),
            )
        )

        # Assert
        assert result.ok
        item = result.value
        assert item.status == InvitationStatus.PENDING
        assert item.company_id == str(company.id)
        assert item.contact_id == str(contact.id)
        assert item.invitation_url.startswith("http://localhost:3000/portal/onboarding/")
        assert dispatcher.last_to(contact.email) is not None
        assert store.invitations[0].invited_by == staff.id

    @pytest.mark.asyncio
    async def test_client_account_cannot_invite(self, unit_env):
        use_case = await unit_env.get(IssueClientInvitationUseCase)
        store = await unit_env.get(InMemoryStore)
        company = make_company(store)
        contact = make_contact(store, company)
        client = make_account(
            store, email="ana@acme.example", account_type=AccountType.CLIENT
        )

        result = await use_case.execute(
            IssueClientInvitationRequest(
                actor_id=str(client.id),
                company_id=str(company.id),
                contact_id=str(contact.id),
            )
        )

        assert result.kind == ErrorKind.UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_unknown_company(self, unit_env):
        use_case = await unit_env.get(IssueClientInvitationUseCase)
        store = await unit_env.get(InMemoryStore)
        staff = make_account(store)

        result = await use_case.execute(
            IssueClientInvitationRequest(
                actor_id=str(staff.id),
                company_id=str(uuid4()),
                contact_id=str(uuid4()),
            )
        )

        assert result.kind == ErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_malformed_contact_id(self, unit_env):
        use_case = await unit_env.get(IssueClientInvitationUseCase)
        store = await unit_env.get(InMemoryStore)
        staff = make_account(store)
        company = make_company(store)

        result = await use_case.execute(
            IssueClientInvitationRequest(
                actor_id=str(staff.id), company_id=str(company.id), contact_id="42"
            )
        )

        assert result.kind == ErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_contact_of_another_company(self, unit_env):
        use_case = await unit_env.get(IssueClientInvitationUseCase)
        store = await unit_env.get(InMemoryStore)
        staff = make_account(store)
        company = make_company(store)
        stranger = make_contact(store, make_company(store, name="Other"))

        result = await use_case.execute(
            IssueClientInvitationRequest(
                actor_id=str(staff.id),
                company_id=str(company.id),
                contact_id=str(stranger.id),
            )
        )

        assert result.kind == ErrorKind.INVALID_INPUT
        assert store.invitations == []

    @pytest.mark.asyncio
    async def test_second_invitation_is_duplicate(self, unit_env):
        use_case = await unit_env.get(IssueClientInvitationUseCase)
        store = await unit_env.get(InMemoryStore)
        staff = make_account(store)
        company = make_company(store)
        contact = make_contact(store, company)
        request = IssueClientInvitationRequest(
            actor_id=str(staff.id),
            company_id=str(company.id),
            contact_id=str(contact.id),
        )
        await use_case.execute(request)

        result = await use_case.execute(request)

        assert result.kind == ErrorKind.DUPLICATE

"""Unit tests for RevokeInvitationUseCase and ListCompanyInvitationsUseCase."""

from uuid import uuid4

import pytest

from onboard.application.usecase.invitation import (
    IssueClientInvitationRequest,
    IssueClientInvitationUseCase,
    ListCompanyInvitationsRequest,
    ListCompanyInvitationsUseCase,
    RevokeInvitationRequest,
    RevokeInvitationUseCase,
)
from onboard.domain.service import FrozenClock
from onboard.domain.value import AccountType, ErrorKind, InvitationStatus
from onboard.persistence.repository.inmemory import InMemoryStore
from tests.conftest import make_account, make_company, make_contact
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _issue(env, staff, company, contact):
    use_case = await env.get(IssueClientInvitationUseCase)
    result = await use_case.execute(
        IssueClientInvitationRequest(
            actor_id=str(staff.id),
            company_id=str(company.id),
            contact_id=str(contact.id),
        )
    )
    return result.value


class TestRevokeInvitationUseCase:
    """Tests for RevokeInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_staff_revokes(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(RevokeInvitationUseCase)
        staff = make_account(store)
        company = make_company(store)
        item = await _issue(unit_env, staff, company, make_contact(store, company))

        result = await use_case.execute(
            RevokeInvitationRequest(
                actor_id=str(staff.id), invitation_id=item.invitation_id
            )
        )

        assert result.value.status == InvitationStatus.REVOKED

    @pytest.mark.asyncio
    async def test_revoking_twice_returns_revoked(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(RevokeInvitationUseCase)
        staff = make_account(store)
        company = make_company(store)
        item = await _issue(unit_env, staff, company, make_contact(store, company))
        request = RevokeInvitationRequest(
            actor_id=str(staff.id), invitation_id=item.invitation_id
        )
        await use_case.execute(request)

        result = await use_case.execute(request)

        assert result.ok
        assert result.value.status == InvitationStatus.REVOKED

    @pytest.mark.asyncio
    async def test_client_cannot_revoke(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(RevokeInvitationUseCase)
        staff = make_account(store)
        company = make_company(store)
        item = await _issue(unit_env, staff, company, make_contact(store, company))
        client = make_account(
            store, email="client@acme.example", account_type=AccountType.CLIENT
        )

        result = await use_case.execute(
            RevokeInvitationRequest(
                actor_id=str(client.id), invitation_id=item.invitation_id
            )
        )

        assert result.kind == ErrorKind.UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_unknown_invitation(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(RevokeInvitationUseCase)
        staff = make_account(store)

        result = await use_case.execute(
            RevokeInvitationRequest(actor_id=str(staff.id), invitation_id=str(uuid4()))
        )

        assert result.kind == ErrorKind.NOT_FOUND


class TestListCompanyInvitationsUseCase:
    """Tests for ListCompanyInvitationsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_newest_first_with_expiry_applied(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        clock = await unit_env.get(FrozenClock)
        use_case = await unit_env.get(ListCompanyInvitationsUseCase)
        staff = make_account(store)
        company = make_company(store)
        old = await _issue(unit_env, staff, company, make_contact(store, company))
        clock.advance(days=8)
        new = await _issue(
            unit_env,
            staff,
            company,
            make_contact(store, company, full_name="Luis", email="luis@acme.example"),
        )

        result = await use_case.execute(
            ListCompanyInvitationsRequest(
                actor_id=str(staff.id), company_id=str(company.id)
            )
        )

        items = result.value.invitations
        assert [i.invitation_id for i in items] == [new.invitation_id, old.invitation_id]
        assert [i.status for i in items] == [
            InvitationStatus.PENDING,
            InvitationStatus.EXPIRED,
        ]

    @pytest.mark.asyncio
    async def test_unknown_company(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(ListCompanyInvitationsUseCase)
        staff = make_account(store)

        result = await use_case.execute(
            ListCompanyInvitationsRequest(actor_id=str(staff.id), company_id=str(uuid4()))
        )

        assert result.kind == ErrorKind.NOT_FOUND

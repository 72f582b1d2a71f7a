"""Unit tests for RegisterClientAccountUseCase."""

import pytest

from onboard.application.usecase.onboarding import (
    RegisterClientAccountRequest,
    RegisterClientAccountUseCase,
)
from onboard.domain.service import FrozenClock, InvitationService, JWTService
from onboard.domain.value import (
    AccountType,
    ErrorKind,
    InvitationNotice,
    InvitationStatus,
    InvitationTarget,
)
from onboard.persistence.repository.inmemory import InMemoryStore
from tests.conftest import make_account, make_company, make_contact
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _invite(env):
    store = await env.get(InMemoryStore)
    service = await env.get(InvitationService)
    company = make_company(store)
    contact = make_contact(store, company)
    issued = await service.issue(
        InvitationTarget.client(company.id, contact.id),
        InvitationNotice(
            to=contact.email, recipient_name=contact.full_name, organisation_name="Acme"
        ),
    )
    return company, contact, issued.value.token.root


class TestRegisterClientAccountUseCase:
    """Tests for RegisterClientAccountUseCase."""

    @pytest.mark.asyncio
    async def test_registers_new_account(self, unit_env):
        use_case = await unit_env.get(RegisterClientAccountUseCase)
        jwt_service = await unit_env.get(JWTService)
        service = await unit_env.get(InvitationService)
        company, contact, token = await _invite(unit_env)

        result = await use_case.execute(
            RegisterClientAccountRequest(token=token, name="Ana", password="secret123")
        )

        assert result.ok
        response = result.value
        assert response.is_new
        assert response.account_type == AccountType.CLIENT
        assert response.company_id == str(company.id)
        payload = jwt_service.verify_token(response.session_token)
        assert payload.account_id == response.account_id
        # Registering does not consume the link
        resolved = await service.resolve(token)
        assert resolved.value.status == InvitationStatus.PENDING

    @pytest.mark.asyncio
    async def test_registering_again_with_same_password(self, unit_env):
        """A half-finished onboarding can be resumed from the same link."""
        use_case = await unit_env.get(RegisterClientAccountUseCase)
        store = await unit_env.get(InMemoryStore)
        _, _, token = await _invite(unit_env)
        request = RegisterClientAccountRequest(
            token=token, name="Ana", password="secret123"
        )
        first = await use_case.execute(request)

        second = await use_case.execute(request)

        assert not second.value.is_new
        assert second.value.account_id == first.value.account_id
        assert len(store.accounts) == 1

    @pytest.mark.asyncio
    async def test_existing_account_needs_its_password(self, unit_env):
        use_case = await unit_env.get(RegisterClientAccountUseCase)
        store = await unit_env.get(InMemoryStore)
        _, contact, token = await _invite(unit_env)
        make_account(store, email=contact.email, password="original-password")

        wrong = await use_case.execute(
            RegisterClientAccountRequest(token=token, name="Ana", password="guessed!")
        )
        right = await use_case.execute(
            RegisterClientAccountRequest(
                token=token, name="Ana", password="original-password"
            )
        )

        assert wrong.kind == ErrorKind.UNAUTHORIZED
        assert right.ok
        assert not right.value.is_new
        assert right.value.account_type == AccountType.CLIENT

    @pytest.mark.asyncio
    async def test_account_of_another_client_is_refused(self, unit_env):
        """No session is issued for a contact the account is not linked to."""
        use_case = await unit_env.get(RegisterClientAccountUseCase)
        service = await unit_env.get(InvitationService)
        store = await unit_env.get(InMemoryStore)
        _, contact, token = await _invite(unit_env)
        other_company = make_company(store, name="Other")
        other_contact = make_contact(store, other_company, email=contact.email)
        existing = make_account(
            store,
            email=contact.email,
            account_type=AccountType.CLIENT,
            password="original-password",
            contact=other_contact,
        )

        result = await use_case.execute(
            RegisterClientAccountRequest(
                token=token, name="Ana", password="original-password"
            )
        )

        assert result.kind == ErrorKind.INVALID_STATE
        assert store.accounts[existing.id].contact_id == other_contact.id
        resolved = await service.resolve(token)
        assert resolved.value.status == InvitationStatus.PENDING

    @pytest.mark.asyncio
    async def test_short_password(self, unit_env):
        use_case = await unit_env.get(RegisterClientAccountUseCase)
        store = await unit_env.get(InMemoryStore)
        _, _, token = await _invite(unit_env)

        result = await use_case.execute(
            RegisterClientAccountRequest(token=token, name="Ana", password="123")
        )

        assert result.kind == ErrorKind.INVALID_INPUT
        assert store.accounts == {}

    @pytest.mark.asyncio
    async def test_expired_link(self, unit_env):
        use_case = await unit_env.get(RegisterClientAccountUseCase)
        clock = await unit_env.get(FrozenClock)
        _, _, token = await _invite(unit_env)
        clock.advance(days=8)

        result = await use_case.execute(
            RegisterClientAccountRequest(token=token, name="Ana", password="secret123")
        )

        assert result.kind == ErrorKind.EXPIRED

    @pytest.mark.asyncio
    async def test_unknown_link(self, unit_env):
        use_case = await unit_env.get(RegisterClientAccountUseCase)

        result = await use_case.execute(
            RegisterClientAccountRequest(
                token="unknown-token", name="Ana", password="secret123"
            )
        )

        assert result.kind == ErrorKind.NOT_FOUND

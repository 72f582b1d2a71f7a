"""Unit tests for LoginUseCase."""

import pytest

from onboard.application.usecase.auth import LoginRequest, LoginUseCase
from onboard.domain.service import JWTService
from onboard.domain.value import AccountType, ErrorKind
from onboard.persistence.repository.inmemory import InMemoryStore
from tests.conftest import make_account, make_company, make_contact
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _request(email, password, account_type=AccountType.INTERNAL) -> LoginRequest:
    return LoginRequest(email=email, password=password, account_type=account_type)


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_staff_login_issues_session(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)
        staff = make_account(store, password="staff-pass")

        result = await use_case.execute(
            _request("  Staff@Onboard.example ", "staff-pass")
        )

        assert result.ok
        assert result.value.account_id == str(staff.id)
        assert result.value.account_type == AccountType.INTERNAL
        payload = jwt_service.verify_token(result.value.session_token)
        assert payload.account_id == str(staff.id)

    @pytest.mark.asyncio
    async def test_client_login_on_portal(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(LoginUseCase)
        company = make_company(store)
        contact = make_contact(store, company)
        client = make_account(
            store,
            email=contact.email,
            account_type=AccountType.CLIENT,
            password="client-pass",
            contact=contact,
        )

        result = await use_case.execute(
            _request("ana@acme.example", "client-pass", AccountType.CLIENT)
        )

        assert result.value.account_id == str(client.id)

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(LoginUseCase)
        make_account(store, password="staff-pass")

        result = await use_case.execute(
            _request("staff@onboard.example", "not-the-pass")
        )

        assert result.kind == ErrorKind.UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_unknown_email_gets_same_error(self, unit_env):
        use_case = await unit_env.get(LoginUseCase)

        result = await use_case.execute(_request("nobody@onboard.example", "x"))

        assert result.kind == ErrorKind.UNAUTHORIZED
        assert result.message == "Invalid email or password"

    @pytest.mark.asyncio
    async def test_account_type_must_match_surface(self, unit_env):
        """A client cannot open a staff session with valid credentials."""
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(LoginUseCase)
        make_account(
            store,
            email="ana@acme.example",
            account_type=AccountType.CLIENT,
            password="client-pass",
        )

        result = await use_case.execute(_request("ana@acme.example", "client-pass"))

        assert result.kind == ErrorKind.UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_account_without_password(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(LoginUseCase)
        make_account(store)

        result = await use_case.execute(_request("staff@onboard.example", ""))

        assert result.kind == ErrorKind.UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_malformed_email(self, unit_env):
        use_case = await unit_env.get(LoginUseCase)

        result = await use_case.execute(_request("not an email", "secret"))

        assert result.kind == ErrorKind.INVALID_INPUT

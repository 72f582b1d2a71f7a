"""Tests for the client onboarding flow over HTTP."""

import pytest

from onboard.domain.value import AccountType
from tests.conftest import COMPLETE_DATA, make_account, make_company, make_contact
from tests.harness import create_api_fixture

api = create_api_fixture()


def token_of(invitation: dict) -> str:
    return invitation["invitation_url"].rsplit("/", 1)[-1]


async def invite_contact(api, company, contact) -> dict:
    api.login(make_account(api.store))
    response = await api.client.post(
        f"/companies/{company.id}/invitations",
        json={"contact_id": str(contact.id)},
    )
    assert response.status_code == 201
    api.logout()
    return response.json()


@pytest.mark.asyncio
async def test_full_onboarding_flow(api):
    company = make_company(api.store)
    contact = make_contact(api.store, company)
    invitation = await invite_contact(api, company, contact)
    token = token_of(invitation)

    assert api.dispatcher.last_to("ana@acme.example") is not None

    state = await api.client.get(f"/onboarding/{token}")
    assert state.json()["state"] == "valid"
    assert state.json()["company_name"] == "Acme"
    assert state.json()["contact_name"] == "Ana Garcia"

    account = await api.client.post(
        f"/onboarding/{token}/account",
        json={"name": "Ana Garcia", "password": "s3cret-pass"},
    )
    assert account.status_code == 200
    assert account.json()["account_type"] == "client"
    assert account.json()["is_new"] is True
    assert "session_token" not in account.json()
    assert "auth_token" in account.cookies

    company_data = await api.client.put(f"/onboarding/{token}/company", json=COMPLETE_DATA)
    assert company_data.status_code == 200
    assert company_data.json()["missing_fields"] == []

    terms = await api.client.post(f"/onboarding/{token}/terms", json={})
    assert terms.status_code == 200
    assert terms.json()["invitation_consumed"] is True
    assert terms.json()["company"]["terms_accepted"] is True
    assert terms.json()["company"]["terms_accepted_by_name"] == "Ana Garcia"

    state = await api.client.get(f"/onboarding/{token}")
    assert state.json()["state"] == "used"


@pytest.mark.asyncio
async def test_unknown_token_state(api):
    response = await api.client.get("/onboarding/does-not-exist")

    assert response.status_code == 200
    assert response.json() == {
        "state": "not_found",
        "kind": "client_portal",
        "email": None,
        "expires_at": None,
        "company_name": None,
        "contact_name": None,
        "onboarding_state": None,
        "role": None,
        "workspace_name": None,
    }


@pytest.mark.asyncio
async def test_terms_with_missing_data(api):
    company = make_company(api.store)
    contact = make_contact(api.store, company)
    token = token_of(await invite_contact(api, company, contact))

    response = await api.client.post(f"/onboarding/{token}/terms", json={})

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["error"] == "incomplete_data"
    assert set(detail["details"]["missing_fields"]) == {
        "legal_name",
        "tax_id",
        "fiscal_address",
    }


@pytest.mark.asyncio
async def test_expired_link(api):
    company = make_company(api.store)
    contact = make_contact(api.store, company)
    token = token_of(await invite_contact(api, company, contact))
    api.clock.advance(days=8)

    state = await api.client.get(f"/onboarding/{token}")
    account = await api.client.post(
        f"/onboarding/{token}/account",
        json={"name": "Ana Garcia", "password": "s3cret-pass"},
    )

    assert state.json()["state"] == "expired"
    assert account.status_code == 410
    assert account.json()["detail"]["error"] == "expired"


@pytest.mark.asyncio
async def test_short_password_rejected(api):
    company = make_company(api.store)
    contact = make_contact(api.store, company)
    token = token_of(await invite_contact(api, company, contact))

    response = await api.client.post(
        f"/onboarding/{token}/account", json={"name": "Ana", "password": "123"}
    )

    assert response.status_code == 422
    assert response.json()["detail"]["error"] == "invalid_input"


@pytest.mark.asyncio
async def test_portal_session_flow(api):
    company = make_company(api.store)
    contact = make_contact(api.store, company)
    token = token_of(await invite_contact(api, company, contact))
    registered = await api.client.post(
        f"/onboarding/{token}/account",
        json={"name": "Ana Garcia", "password": "s3cret-pass"},
    )
    api.use_session(registered.cookies["auth_token"])

    current = await api.client.get("/portal/company")
    assert current.status_code == 200
    assert current.json()["onboarding_state"] == "data_incomplete"

    updated = await api.client.put("/portal/company", json=COMPLETE_DATA)
    assert updated.json()["onboarding_state"] == "data_complete"

    terms = await api.client.post(
        "/portal/company/terms", json={"contact_name": "Ana G."}
    )
    assert terms.status_code == 200
    assert terms.json()["company"]["terms_accepted_by_name"] == "Ana G."
    assert terms.json()["invitation_consumed"] is False


@pytest.mark.asyncio
async def test_portal_requires_session(api):
    response = await api.client.get("/portal/company")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_portal_rejects_internal_account(api):
    api.login(make_account(api.store))

    response = await api.client.get("/portal/company")

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_invite_requires_internal_account(api):
    company = make_company(api.store)
    contact = make_contact(api.store, company)
    api.login(
        make_account(api.store, email="client@acme.example", account_type=AccountType.CLIENT)
    )

    response = await api.client.post(
        f"/companies/{company.id}/invitations",
        json={"contact_id": str(contact.id)},
    )

    assert response.status_code == 403
    assert response.json()["detail"]["error"] == "unauthorized"

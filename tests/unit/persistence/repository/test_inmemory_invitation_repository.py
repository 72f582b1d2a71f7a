"""Tests for the in-memory invitation repository guarantees."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from onboard.domain.error import DuplicateActiveInvitationError, TokenCollisionError
from onboard.domain.model import Invitation
from onboard.domain.value import (
    CompanyId,
    ContactId,
    InvitationId,
    InvitationKind,
    InvitationStatus,
    InvitationTarget,
    InvitationToken,
    TeamRole,
    WorkspaceId,
)
from onboard.persistence.repository.inmemory import (
    InMemoryInvitationRepository,
    InMemoryStore,
)

NOW = datetime(2026, 1, 15, 9, 0, tzinfo=timezone.utc)


def client_invitation(company_id, contact_id, token="token-a", **fields) -> Invitation:
    return Invitation(
        id=InvitationId(uuid4()),
        kind=InvitationKind.CLIENT_PORTAL,
        token=InvitationToken(token),
        company_id=company_id,
        contact_id=contact_id,
        created_at=fields.pop("created_at", NOW),
        expires_at=fields.pop("expires_at", NOW + timedelta(days=7)),
        **fields,
    )


@pytest.fixture
def repository():
    return InMemoryInvitationRepository(InMemoryStore())


@pytest.fixture
def target():
    return InvitationTarget.client(CompanyId(uuid4()), ContactId(uuid4()))


@pytest.mark.asyncio
async def test_token_is_unique(repository, target):
    await repository.create(client_invitation(target.company_id, target.contact_id))
    other = InvitationTarget.client(CompanyId(uuid4()), ContactId(uuid4()))

    with pytest.raises(TokenCollisionError):
        await repository.create(client_invitation(other.company_id, other.contact_id))


@pytest.mark.asyncio
async def test_one_pending_invitation_per_target(repository, target):
    await repository.create(client_invitation(target.company_id, target.contact_id))

    with pytest.raises(DuplicateActiveInvitationError):
        await repository.create(
            client_invitation(target.company_id, target.contact_id, token="token-b")
        )


@pytest.mark.asyncio
async def test_terminal_invitation_does_not_block_target(repository, target):
    first = await repository.create(
        client_invitation(target.company_id, target.contact_id)
    )
    await repository.transition_status(
        first.id, expected=InvitationStatus.PENDING, status=InvitationStatus.REVOKED
    )

    second = await repository.create(
        client_invitation(target.company_id, target.contact_id, token="token-b")
    )

    assert await repository.find_active(target, NOW) == second


@pytest.mark.asyncio
async def test_transition_requires_expected_status(repository, target):
    invitation = await repository.create(
        client_invitation(target.company_id, target.contact_id)
    )

    accepted = await repository.transition_status(
        invitation.id,
        expected=InvitationStatus.PENDING,
        status=InvitationStatus.ACCEPTED,
        used_at=NOW,
    )
    again = await repository.transition_status(
        invitation.id,
        expected=InvitationStatus.PENDING,
        status=InvitationStatus.ACCEPTED,
        used_at=NOW,
    )

    assert accepted.status == InvitationStatus.ACCEPTED
    assert accepted.used_at == NOW
    assert again is None


@pytest.mark.asyncio
async def test_transition_checks_expiry_and_company(repository, target):
    invitation = await repository.create(
        client_invitation(target.company_id, target.contact_id)
    )

    late = await repository.transition_status(
        invitation.id,
        expected=InvitationStatus.PENDING,
        status=InvitationStatus.ACCEPTED,
        valid_at=NOW + timedelta(days=8),
    )
    wrong_company = await repository.transition_status(
        invitation.id,
        expected=InvitationStatus.PENDING,
        status=InvitationStatus.ACCEPTED,
        company_id=CompanyId(uuid4()),
    )
    at_expiry = await repository.transition_status(
        invitation.id,
        expected=InvitationStatus.PENDING,
        status=InvitationStatus.ACCEPTED,
        valid_at=invitation.expires_at,
    )

    assert late is None
    assert wrong_company is None
    assert at_expiry.status == InvitationStatus.ACCEPTED


@pytest.mark.asyncio
async def test_expire_stale(repository, target):
    invitation = await repository.create(
        client_invitation(target.company_id, target.contact_id)
    )

    assert await repository.expire_stale(target, NOW) == 0
    assert await repository.expire_stale(target, NOW + timedelta(days=8)) == 1

    stored = await repository.find_by_id(invitation.id)
    assert stored.status == InvitationStatus.EXPIRED
    assert await repository.find_active(target, NOW) is None


@pytest.mark.asyncio
async def test_listings_are_newest_first(repository):
    company_id = CompanyId(uuid4())
    older = await repository.create(
        client_invitation(company_id, ContactId(uuid4()), token="old")
    )
    newer = await repository.create(
        client_invitation(
            company_id,
            ContactId(uuid4()),
            token="new",
            created_at=NOW + timedelta(hours=1),
        )
    )
    workspace_id = WorkspaceId(uuid4())
    await repository.create(
        Invitation(
            id=InvitationId(uuid4()),
            kind=InvitationKind.TEAM,
            token=InvitationToken("team"),
            workspace_id=workspace_id,
            email="new@acme.example",
            role=TeamRole.MEMBER,
            expires_at=NOW + timedelta(days=7),
        )
    )

    assert await repository.find_by_company(company_id) == [newer, older]
    assert len(await repository.find_by_workspace(workspace_id)) == 1
    assert await repository.find_by_workspace(WorkspaceId(uuid4())) == []

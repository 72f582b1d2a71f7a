"""Unit tests for ListWorkspaceInvitationsUseCase."""

from uuid import uuid4

import pytest

from onboard.application.usecase.invitation import (
    IssueTeamInvitationRequest,
    IssueTeamInvitationUseCase,
    ListWorkspaceInvitationsRequest,
    ListWorkspaceInvitationsUseCase,
    RevokeInvitationRequest,
    RevokeInvitationUseCase,
)
from onboard.domain.model import WorkspaceMember
from onboard.domain.service import FrozenClock
from onboard.domain.value import (
    AccountType,
    ErrorKind,
    InvitationStatus,
    TeamRole,
    WorkspaceMemberId,
)
from onboard.persistence.repository.inmemory import InMemoryStore
from tests.conftest import make_account, make_workspace
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _invite(env, owner, workspace, email: str):
    use_case = await env.get(IssueTeamInvitationUseCase)
    result = await use_case.execute(
        IssueTeamInvitationRequest(
            actor_id=str(owner.id), workspace_id=str(workspace.id), email=email
        )
    )
    return result.value


def _request(actor, workspace, status=None) -> ListWorkspaceInvitationsRequest:
    return ListWorkspaceInvitationsRequest(
        actor_id=str(actor.id), workspace_id=str(workspace.id), status=status
    )


class TestListWorkspaceInvitationsUseCase:
    """Tests for ListWorkspaceInvitationsUseCase."""

    @pytest.mark.asyncio
    async def test_owner_lists_newest_first(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        clock = await unit_env.get(FrozenClock)
        use_case = await unit_env.get(ListWorkspaceInvitationsUseCase)
        owner = make_account(store)
        workspace = make_workspace(store, owner)
        await _invite(unit_env, owner, workspace, "first@acme.example")
        clock.advance(hours=1)
        await _invite(unit_env, owner, workspace, "second@acme.example")

        result = await use_case.execute(_request(owner, workspace))

        assert [i.email for i in result.value.invitations] == [
            "second@acme.example",
            "first@acme.example",
        ]
        assert all(
            "/invitations/" in i.invitation_url for i in result.value.invitations
        )

    @pytest.mark.asyncio
    async def test_overdue_invitations_are_expired(self, unit_env):
        """Listing writes back the lazy expiry of overdue invitations."""
        store = await unit_env.get(InMemoryStore)
        clock = await unit_env.get(FrozenClock)
        use_case = await unit_env.get(ListWorkspaceInvitationsUseCase)
        owner = make_account(store)
        workspace = make_workspace(store, owner)
        item = await _invite(unit_env, owner, workspace, "late@acme.example")
        clock.advance(days=7, seconds=1)

        result = await use_case.execute(_request(owner, workspace))

        assert result.value.invitations[0].status == InvitationStatus.EXPIRED
        stored = next(i for i in store.invitations if str(i.id) == item.invitation_id)
        assert stored.status == InvitationStatus.EXPIRED

    @pytest.mark.asyncio
    async def test_status_filter_is_applied_after_expiry(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        clock = await unit_env.get(FrozenClock)
        use_case = await unit_env.get(ListWorkspaceInvitationsUseCase)
        revoke = await unit_env.get(RevokeInvitationUseCase)
        owner = make_account(store)
        workspace = make_workspace(store, owner)
        await _invite(unit_env, owner, workspace, "overdue@acme.example")
        clock.advance(days=6)
        fresh = await _invite(unit_env, owner, workspace, "fresh@acme.example")
        revoked = await _invite(unit_env, owner, workspace, "gone@acme.example")
        await revoke.execute(
            RevokeInvitationRequest(
                actor_id=str(owner.id), invitation_id=revoked.invitation_id
            )
        )
        clock.advance(days=2)

        pending = await use_case.execute(
            _request(owner, workspace, InvitationStatus.PENDING)
        )
        expired = await use_case.execute(
            _request(owner, workspace, InvitationStatus.EXPIRED)
        )

        assert [i.invitation_id for i in pending.value.invitations] == [
            fresh.invitation_id
        ]
        assert [i.email for i in expired.value.invitations] == ["overdue@acme.example"]

    @pytest.mark.asyncio
    async def test_member_can_list(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(ListWorkspaceInvitationsUseCase)
        owner = make_account(store)
        workspace = make_workspace(store, owner)
        member = make_account(store, email="member@onboard.example")
        store.members.append(
            WorkspaceMember(
                id=WorkspaceMemberId(uuid4()),
                workspace_id=workspace.id,
                account_id=member.id,
                role=TeamRole.MEMBER,
            )
        )
        await _invite(unit_env, owner, workspace, "new@acme.example")

        result = await use_case.execute(_request(member, workspace))

        assert len(result.value.invitations) == 1

    @pytest.mark.asyncio
    async def test_outsider_is_rejected(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(ListWorkspaceInvitationsUseCase)
        owner = make_account(store)
        workspace = make_workspace(store, owner)
        outsider = make_account(store, email="outsider@onboard.example")

        result = await use_case.execute(_request(outsider, workspace))

        assert result.kind == ErrorKind.UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_client_account_is_rejected(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(ListWorkspaceInvitationsUseCase)
        owner = make_account(store)
        workspace = make_workspace(store, owner)
        client = make_account(
            store, email="client@acme.example", account_type=AccountType.CLIENT
        )

        result = await use_case.execute(_request(client, workspace))

        assert result.kind == ErrorKind.UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_unknown_workspace(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(ListWorkspaceInvitationsUseCase)
        owner = make_account(store)

        result = await use_case.execute(
            ListWorkspaceInvitationsRequest(
                actor_id=str(owner.id), workspace_id="not-a-uuid"
            )
        )

        assert result.kind == ErrorKind.NOT_FOUND

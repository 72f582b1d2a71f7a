"""Invitation domain service."""

from datetime import timedelta
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError

from onboard.config import InvitationSettings
from onboard.domain.error import (
    DuplicateActiveInvitationError,
    TokenCollisionError,
    TokenGenerationExhaustedError,
)
from onboard.domain.model.invitation import Invitation
from onboard.domain.repository import InvitationRepository, UnitOfWork
from onboard.domain.value import (
    AccountId,
    CompanyId,
    Err,
    ErrorKind,
    InvitationId,
    InvitationKind,
    InvitationNotice,
    InvitationStatus,
    InvitationTarget,
    InvitationToken,
    Ok,
    Result,
    TeamRole,
    WorkspaceId,
)

from .base import Service
from .clock import Clock
from .notification import (
    NotificationDispatcher,
    invitation_link,
    render_invitation_email,
)
from .token_generator import TokenGenerator


def status_error(invitation: Invitation) -> Err:
    """Err describing why a non-pending invitation can no longer be used."""
    if invitation.status == InvitationStatus.EXPIRED:
        return Err(ErrorKind.EXPIRED, "This invitation has expired")
    if invitation.status == InvitationStatus.REVOKED:
        return Err(ErrorKind.REVOKED, "This invitation has been revoked")
    if invitation.status == InvitationStatus.ACCEPTED:
        return Err(ErrorKind.ALREADY_USED, "This invitation has already been used")
    return Err(
        ErrorKind.INVALID_STATE,
        f"Invitation is {invitation.status.value} and cannot be used here",
    )


class InvitationService(Service):
    """Issues, resolves, revokes and consumes invitations.

    Expiry is lazy: nothing sweeps stale rows in the background. A pending
    invitation past its expiry is moved to EXPIRED the next time it is read.
    """

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        token_generator: TokenGenerator,
        notification_dispatcher: NotificationDispatcher,
        unit_of_work: UnitOfWork,
        clock: Clock,
        settings: InvitationSettings,
        frontend_url: str,
    ) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
            token_generator: Source of invitation tokens
            notification_dispatcher: Best-effort e-mail delivery
            unit_of_work: Commits the invitation before it is announced
            clock: Time source
            settings: Invitation settings (validity, retries)
            frontend_url: Base URL for invitation links
        """
        self.invitation_repository = invitation_repository
        self.token_generator = token_generator
        self.notification_dispatcher = notification_dispatcher
        self.unit_of_work = unit_of_work
        self.clock = clock
        self.settings = settings
        self.frontend_url = frontend_url

    async def issue(
        self,
        target: InvitationTarget,
        notice: InvitationNotice,
        invited_by: Optional[AccountId] = None,
        role: Optional[TeamRole] = None,
    ) -> Result[Invitation]:
        """Issue a new invitation and announce it.

        Args:
            target: Who the invitation is addressed to
            notice: Recipient details for the e-mail
            invited_by: Account issuing the invitation
            role: Role granted by a team invitation

        Returns:
            Ok with the pending invitation, or Err(DUPLICATE) if an active
            invitation already exists for the target
        """
        with logfire.span(
            "invitation_service.issue",
            kind=target.kind.value,
            target=target.describe(),
        ):
            if target.kind == InvitationKind.TEAM and role is None:
                return Err(ErrorKind.INVALID_INPUT, "Team invitations need a role")

            now = self.clock.now()

            # Reading the target's invitations is an access: apply lazy expiry
            stale = await self.invitation_repository.expire_stale(target, now)
            if stale:
                logfire.info(
                    "Stale invitations expired", target=target.describe(), count=stale
                )

            existing = await self.invitation_repository.find_active(target, now)
            if existing:
                logfire.warn(
                    "Active invitation already exists",
                    target=target.describe(),
                    invitation_id=str(existing.id),
                )
                return Err(
                    ErrorKind.DUPLICATE,
                    "A pending invitation already exists for this recipient",
                    {"invitation_id": str(existing.id)},
                )

            try:
                invitation = await self._create_with_unique_token(
                    target, invited_by, role
                )
            except DuplicateActiveInvitationError:
                # Lost the check-then-act race to a concurrent issue
                logfire.warn(
                    "Concurrent invitation won the race", target=target.describe()
                )
                return Err(
                    ErrorKind.DUPLICATE,
                    "A pending invitation already exists for this recipient",
                )

            await self.unit_of_work.commit()
            logfire.info(
                "Invitation issued",
                invitation_id=str(invitation.id),
                kind=invitation.kind.value,
                token=invitation.token.redacted,
                expires_at=invitation.expires_at.isoformat(),
            )

            await self._notify(invitation, notice)
            return Ok(invitation)

    async def resolve(self, token: str | InvitationToken) -> Result[Invitation]:
        """Look up an invitation by token, applying lazy expiry.

        Args:
            token: Invitation token (raw or validated)

        Returns:
            Ok with the current invitation (any status), Err(NOT_FOUND) if no
            invitation carries this token
        """
        parsed = self._parse_token(token)
        redacted = parsed.redacted if parsed else str(token)[:8] + "..."

        with logfire.span("invitation_service.resolve", token=redacted):
            invitation = (
                await self.invitation_repository.find_by_token(parsed)
                if parsed
                else None
            )
            if invitation is None:
                logfire.warn("Invitation not found", token=redacted)
                return Err(ErrorKind.NOT_FOUND, "Invitation not found")

            if (
                invitation.status == InvitationStatus.PENDING
                and invitation.is_past_expiry(self.clock.now())
            ):
                return Ok(await self._expire(invitation))

            return Ok(invitation)

    async def revoke(self, invitation_id: InvitationId) -> Result[Invitation]:
        """Revoke an invitation.

        Idempotent and status-agnostic: revoking an invitation that is already
        terminal succeeds without changing it. Authorization is the caller's
        responsibility.

        Args:
            invitation_id: Invitation to revoke

        Returns:
            Ok with the invitation as stored after the call
        """
        with logfire.span(
            "invitation_service.revoke", invitation_id=str(invitation_id)
        ):
            invitation = await self.invitation_repository.find_by_id(invitation_id)
            if invitation is None:
                logfire.warn("Invitation to revoke not found", invitation_id=str(invitation_id))
                return Err(ErrorKind.NOT_FOUND, "Invitation not found")

            if invitation.status.is_terminal:
                logfire.info(
                    "Revoke on terminal invitation ignored",
                    invitation_id=str(invitation_id),
                    status=invitation.status.value,
                )
                return Ok(invitation)

            revoked = await self.invitation_repository.transition_status(
                invitation_id,
                expected=InvitationStatus.PENDING,
                status=InvitationStatus.REVOKED,
            )
            if revoked is None:
                # A concurrent transition landed first; report what is stored
                current = await self.invitation_repository.find_by_id(invitation_id)
                return Ok(current or invitation)

            logfire.info("Invitation revoked", invitation_id=str(invitation_id))
            return Ok(revoked)

    async def consume(
        self,
        token: str | InvitationToken,
        company_id: Optional[CompanyId] = None,
    ) -> Result[Invitation]:
        """Move a pending, unexpired invitation to ACCEPTED.

        The transition is one conditional write, so a concurrent revoke or
        expiry that lands first always wins.

        Args:
            token: Invitation token
            company_id: If given, the invitation must target this company

        Returns:
            Ok with the accepted invitation, or an Err explaining why it
            could not be consumed
        """
        parsed = self._parse_token(token)
        if parsed is None:
            return Err(ErrorKind.NOT_FOUND, "Invitation not found")

        with logfire.span("invitation_service.consume", token=parsed.redacted):
            invitation = await self.invitation_repository.find_by_token(parsed)
            if invitation is None:
                logfire.warn("Invitation to consume not found", token=parsed.redacted)
                return Err(ErrorKind.NOT_FOUND, "Invitation not found")

            now = self.clock.now()
            consumed = await self.invitation_repository.transition_status(
                invitation.id,
                expected=InvitationStatus.PENDING,
                status=InvitationStatus.ACCEPTED,
                used_at=now,
                valid_at=now,
                company_id=company_id,
            )
            if consumed:
                logfire.info(
                    "Invitation consumed",
                    invitation_id=str(consumed.id),
                    used_at=now.isoformat(),
                )
                return Ok(consumed)

            # Explain the refusal; resolving also persists a due expiry
            current = await self.resolve(parsed)
            if isinstance(current, Err):
                return current
            if current.value.status == InvitationStatus.PENDING:
                error = Err(
                    ErrorKind.INVALID_STATE,
                    "Invitation does not belong to this company",
                )
            else:
                error = status_error(current.value)
            logfire.warn(
                "Invitation not consumed",
                invitation_id=str(invitation.id),
                reason=error.kind.value,
            )
            return error

    async def list_for_company(self, company_id: CompanyId) -> list[Invitation]:
        """List a company's invitations with lazy expiry applied."""
        with logfire.span(
            "invitation_service.list_for_company", company_id=str(company_id)
        ):
            invitations = await self.invitation_repository.find_by_company(company_id)
            result = await self._expire_overdue(invitations)
            logfire.info(
                "Company invitations listed",
                company_id=str(company_id),
                count=len(result),
            )
            return result

    async def list_for_workspace(
        self, workspace_id: WorkspaceId, status: Optional[InvitationStatus] = None
    ) -> list[Invitation]:
        """List a workspace's team invitations with lazy expiry applied.

        Args:
            workspace_id: Workspace whose invitations to list
            status: Only keep invitations in this status, judged after expiry

        Returns:
            Invitations, newest first
        """
        with logfire.span(
            "invitation_service.list_for_workspace", workspace_id=str(workspace_id)
        ):
            invitations = await self.invitation_repository.find_by_workspace(
                workspace_id
            )
            result = [
                invitation
                for invitation in await self._expire_overdue(invitations)
                if status is None or invitation.status == status
            ]
            logfire.info(
                "Workspace invitations listed",
                workspace_id=str(workspace_id),
                count=len(result),
            )
            return result

    async def _expire_overdue(self, invitations: list[Invitation]) -> list[Invitation]:
        now = self.clock.now()
        result = []
        for invitation in invitations:
            if (
                invitation.status == InvitationStatus.PENDING
                and invitation.is_past_expiry(now)
            ):
                invitation = await self._expire(invitation)
            result.append(invitation)
        return result

    async def _expire(self, invitation: Invitation) -> Invitation:
        """Persist the lazy PENDING -> EXPIRED transition."""
        expired = await self.invitation_repository.transition_status(
            invitation.id,
            expected=InvitationStatus.PENDING,
            status=InvitationStatus.EXPIRED,
        )
        if expired is None:
            # Someone else moved it first (accept, revoke or another reader)
            current = await self.invitation_repository.find_by_id(invitation.id)
            return current or invitation.model_copy(
                update={"status": InvitationStatus.EXPIRED}
            )

        logfire.info(
            "Invitation lazily expired",
            invitation_id=str(invitation.id),
            expires_at=invitation.expires_at.isoformat(),
        )
        return expired

    async def _create_with_unique_token(
        self,
        target: InvitationTarget,
        invited_by: Optional[AccountId],
        role: Optional[TeamRole],
    ) -> Invitation:
        """Insert the invitation, regenerating the token on collision.

        Raises:
            DuplicateActiveInvitationError: If a concurrent issue won
            TokenGenerationExhaustedError: If every attempt collided
        """
        attempts = self.settings.token_retry_attempts
        for attempt in range(1, attempts + 1):
            now = self.clock.now()
            invitation = Invitation(
                id=InvitationId(uuid4()),
                kind=target.kind,
                token=self.token_generator.generate(),
                status=InvitationStatus.PENDING,
                invited_by=invited_by,
                company_id=target.company_id,
                contact_id=target.contact_id,
                workspace_id=target.workspace_id,
                email=target.email,
                role=role if target.kind == InvitationKind.TEAM else None,
                created_at=now,
                expires_at=now + timedelta(days=self.settings.validity_days),
            )
            try:
                return await self.invitation_repository.create(invitation)
            except TokenCollisionError:
                logfire.warn("Invitation token collision, retrying", attempt=attempt)

        logfire.error("Token generation exhausted", attempts=attempts)
        raise TokenGenerationExhaustedError(attempts)

    async def _notify(self, invitation: Invitation, notice: InvitationNotice) -> bool:
        """Send the invitation e-mail; failures are logged and swallowed."""
        link = invitation_link(self.frontend_url, invitation)
        subject, body = render_invitation_email(
            invitation, notice, link, self.settings.validity_days
        )
        try:
            delivered = await self.notification_dispatcher.send(
                notice.to, subject, body
            )
        except Exception as e:
            logfire.error(
                "Error sending invitation email",
                invitation_id=str(invitation.id),
                error=str(e),
                error_type=type(e).__name__,
            )
            return False

        if not delivered:
            logfire.warn(
                "Invitation email not delivered", invitation_id=str(invitation.id)
            )
        return delivered

    @staticmethod
    def _parse_token(token: str | InvitationToken) -> Optional[InvitationToken]:
        if isinstance(token, InvitationToken):
            return token
        try:
            return InvitationToken(token)
        except ValidationError:
            return None

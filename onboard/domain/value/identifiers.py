"""Strongly typed identifiers for onboarding entities.

NewType wrappers keep account, company, contact and invitation IDs from
being mixed up while staying plain UUIDs at runtime.
"""

from typing import NewType
from uuid import UUID

AccountId = NewType("AccountId", UUID)
CompanyId = NewType("CompanyId", UUID)
ContactId = NewType("ContactId", UUID)
WorkspaceId = NewType("WorkspaceId", UUID)
WorkspaceMemberId = NewType("WorkspaceMemberId", UUID)
InvitationId = NewType("InvitationId", UUID)

"""Test configuration and seeding helpers.

The helpers write straight into the in-memory store, the way the CRM and
workspace data would already exist before any invitation is sent.
"""

from uuid import uuid4

from onboard.adapter.password import Argon2CredentialHasher
from onboard.domain.model import Company, Contact, UserAccount, Workspace
from onboard.domain.value import (
    AccountId,
    AccountType,
    CompanyId,
    ContactId,
    WorkspaceId,
)
from onboard.persistence.repository.inmemory import InMemoryStore

COMPLETE_DATA = {
    "legal_name": "Acme Holdings S.L.",
    "tax_id": "B12345678",
    "fiscal_address": "Calle Mayor 1, 28013 Madrid",
}


def make_company(store: InMemoryStore, name: str = "Acme", **fields) -> Company:
    """Seed a client company; pass COMPLETE_DATA to skip the data step."""
    return store.add_company(Company(id=CompanyId(uuid4()), name=name, **fields))


def make_contact(
    store: InMemoryStore,
    company: Company,
    full_name: str = "Ana Garcia",
    email: str = "ana@acme.example",
) -> Contact:
    """Seed a contact of a company."""
    return store.add_contact(
        Contact(
            id=ContactId(uuid4()),
            company_id=company.id,
            full_name=full_name,
            email=email,
        )
    )


def make_account(
    store: InMemoryStore,
    email: str = "staff@onboard.example",
    account_type: AccountType = AccountType.INTERNAL,
    password: str | None = None,
    contact: Contact | None = None,
    name: str = "Staff Member",
) -> UserAccount:
    """Seed an account, hashing the password if one is given."""
    return store.add_account(
        UserAccount(
            id=AccountId(uuid4()),
            email=email,
            name=name,
            password_hash=Argon2CredentialHasher().hash(password) if password else None,
            account_type=account_type,
            contact_id=contact.id if contact else None,
        )
    )


def make_workspace(
    store: InMemoryStore, owner: UserAccount, name: str = "Acme Team"
) -> Workspace:
    """Seed a workspace owned by an account."""
    return store.add_workspace(
        Workspace(id=WorkspaceId(uuid4()), name=name, owner_id=owner.id)
    )

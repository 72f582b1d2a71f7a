"""Shared state of the in-memory repositories.

One store lives for the whole application so that separate requests see
each other's writes, like they would with a database.
"""

from onboard.domain.model import (
    Company,
    Contact,
    Invitation,
    UserAccount,
    Workspace,
    WorkspaceMember,
)


class InMemoryStore:
    """Tables of the in-memory persistence backend."""

    def __init__(self) -> None:
        self.invitations: list[Invitation] = []
        self.companies: dict = {}
        self.contacts: dict = {}
        self.accounts: dict = {}
        self.workspaces: dict = {}
        self.members: list[WorkspaceMember] = []
        self.commits = 0

    def add_company(self, company: Company) -> Company:
        self.companies[company.id] = company
        return company

    def add_contact(self, contact: Contact) -> Contact:
        self.contacts[contact.id] = contact
        return contact

    def add_account(self, account: UserAccount) -> UserAccount:
        self.accounts[account.id] = account
        return account

    def add_workspace(self, workspace: Workspace) -> Workspace:
        self.workspaces[workspace.id] = workspace
        return workspace

"""Domain layer errors.

Business outcomes travel as ``Err`` values (see ``onboard.domain.value.result``).
The exceptions here are raised by repositories when a uniqueness guarantee
of the persistence layer fires; the domain services catch every one of them.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class PersistenceConflictError(DomainError):
    """A write lost against a uniqueness constraint."""

    pass


class TokenCollisionError(PersistenceConflictError):
    """The generated invitation token already exists."""

    def __init__(self, token_prefix: str):
        self.token_prefix = token_prefix
        super().__init__(f"Invitation token collision: {token_prefix}")


class DuplicateActiveInvitationError(PersistenceConflictError):
    """Another pending invitation for the same target was committed first."""

    def __init__(self, target: str):
        self.target = target
        super().__init__(f"Pending invitation already exists for {target}")


class DuplicateAccountError(PersistenceConflictError):
    """An account with the same email was created concurrently."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Account already exists for {email}")


class TokenGenerationExhaustedError(DomainError):
    """Every retry produced a colliding token; treated as an infrastructure fault."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"Could not generate a unique token after {attempts} attempts")

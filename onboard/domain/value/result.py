"""Tagged results returned by domain services and use cases.

Business rejections (unknown token, duplicate invitation, incomplete data...)
are values, not exceptions. Only infrastructure failures raise.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Recoverable and terminal business outcomes."""

    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"
    EXPIRED = "expired"
    REVOKED = "revoked"
    ALREADY_USED = "already_used"
    ALREADY_ACCEPTED = "already_accepted"
    INCOMPLETE_DATA = "incomplete_data"
    INVALID_STATE = "invalid_state"
    UNAUTHORIZED = "unauthorized"
    LIMIT_REACHED = "limit_reached"
    INVALID_INPUT = "invalid_input"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying the error kind and a human readable message."""

    kind: ErrorKind
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]

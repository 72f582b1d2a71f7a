"""Interface layer errors.

Maps business outcomes (``Err`` values) to HTTP responses.
"""

from typing import TypeVar

from fastapi import HTTPException, status

from onboard.domain.value import Err, ErrorKind, Ok, Result

T = TypeVar("T")

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.DUPLICATE: status.HTTP_409_CONFLICT,
    ErrorKind.ALREADY_ACCEPTED: status.HTTP_409_CONFLICT,
    ErrorKind.ALREADY_USED: status.HTTP_409_CONFLICT,
    ErrorKind.INVALID_STATE: status.HTTP_409_CONFLICT,
    ErrorKind.LIMIT_REACHED: status.HTTP_409_CONFLICT,
    ErrorKind.EXPIRED: status.HTTP_410_GONE,
    ErrorKind.REVOKED: status.HTTP_410_GONE,
    ErrorKind.INCOMPLETE_DATA: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.INVALID_INPUT: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
}


class InterfaceError(HTTPException):
    """HTTP error carrying a business error body."""

    def __init__(self, err: Err, status_code: int | None = None) -> None:
        super().__init__(
            status_code=status_code or STATUS_BY_KIND[err.kind],
            detail={
                "error": err.kind.value,
                "message": err.message,
                "details": err.details,
            },
        )


def unwrap(result: Result[T]) -> T:
    """Value of an Ok result, or raise the matching HTTP error.

    Raises:
        InterfaceError: If the result is an Err
    """
    if isinstance(result, Ok):
        return result.value
    raise InterfaceError(result)

"""Tests for mapping business errors to HTTP responses."""

import pytest

from onboard.domain.value import Err, ErrorKind, Ok
from onboard.interface.error import STATUS_BY_KIND, InterfaceError, unwrap


def test_every_error_kind_has_a_status():
    assert set(STATUS_BY_KIND) == set(ErrorKind)


def test_unwrap_ok_returns_value():
    assert unwrap(Ok("value")) == "value"


@pytest.mark.parametrize(
    "kind, status_code",
    [
        (ErrorKind.NOT_FOUND, 404),
        (ErrorKind.DUPLICATE, 409),
        (ErrorKind.LIMIT_REACHED, 409),
        (ErrorKind.EXPIRED, 410),
        (ErrorKind.REVOKED, 410),
        (ErrorKind.INCOMPLETE_DATA, 422),
        (ErrorKind.UNAUTHORIZED, 403),
    ],
)
def test_unwrap_err_raises_with_status(kind, status_code):
    with pytest.raises(InterfaceError) as exc_info:
        unwrap(Err(kind, "nope", {"limit": 5}))

    assert exc_info.value.status_code == status_code
    assert exc_info.value.detail == {
        "error": kind.value,
        "message": "nope",
        "details": {"limit": 5},
    }

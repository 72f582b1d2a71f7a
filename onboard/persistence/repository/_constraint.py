"""Helpers for recognising which constraint an IntegrityError came from."""

from sqlalchemy.exc import IntegrityError


def violated(error: IntegrityError, constraint_name: str) -> bool:
    """Whether the driver error names the given constraint."""
    orig = error.orig
    name = getattr(orig, "constraint_name", None) or getattr(
        getattr(orig, "__cause__", None), "constraint_name", None
    )
    if name is not None:
        return name == constraint_name
    return constraint_name in str(orig)

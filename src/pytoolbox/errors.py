"""
Error kinds raised by pytoolbox operations.

Every operation validates its arguments on entry and raises before any
mutation, so a rejected call leaves the caller's structures untouched.
"""

from __future__ import annotations


class InvalidArgument(ValueError):
    """
    Raised when an operation is called with an argument that breaks its contract.

    Covers absent (None) references, negative counts and out-of-bounds
    indices. This is a programming error to fix at the call site, not a
    transient condition.
    """


def check_int(name: str, value: object) -> None:
    """Reject a position or count that is not a plain int (bools included)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an int, got {type(value).__name__}.")

"""
Exception hierarchy for pg_advisory_key.

This module defines all public exceptions raised by the library.

Users are encouraged to catch `AdvisoryLockKeyError` when they want to handle
all library-related failures, or the builtin each subclass also derives from
(`ValueError`, `AssertionError`) when they prefer conventional handling.
"""

from __future__ import annotations


class AdvisoryLockKeyError(Exception):
    """
    Base exception for all pg_advisory_key errors.

    Example
    -------
    >>> try:
    ...     PostgresAdvisoryLockKey("stock:ABC-0001")
    ... except AdvisoryLockKeyError:
    ...     handle_failure()
    """

    #: Error code for programmatic handling.
    code: str = "advisory_lock_key_error"

    def __init__(self, message: str | None = None) -> None:
        if message is None:
            message = "An unspecified pg_advisory_key error occurred."
        super().__init__(message)


class UnencodableNameError(AdvisoryLockKeyError, ValueError):
    """
    Raised when a name cannot be encoded exactly and hashing is not allowed.

    Exact encodings exist for short ASCII names and for the hex strings that
    `str(key)` produces. Anything else needs ``allow_hashing=True``.

    Example
    -------
    >>> try:
    ...     key = PostgresAdvisoryLockKey("withdraw:user:42")
    ... except UnencodableNameError:
    ...     key = PostgresAdvisoryLockKey("withdraw:user:42", allow_hashing=True)
    """

    code: str = "unencodable_name"

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        super().__init__(message)


class InvariantViolation(AdvisoryLockKeyError, AssertionError):
    """
    Raised when a key is used against its contract.

    Reading `key` on a paired key (or `keys` on a single key) is a programming
    error. Check `uses_single_argument_form` first.
    """

    code: str = "invariant_violation"


def require(condition: bool, message: str | None = None) -> None:
    """Raise InvariantViolation unless ``condition`` holds."""
    if not condition:
        raise InvariantViolation(message or "invariant violated")

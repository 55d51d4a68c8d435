from .exceptions import AdvisoryLockKeyError, InvariantViolation, UnencodableNameError
from .hashing import hash_string
from .key import KeyEncoding, PostgresAdvisoryLockKey
from .pairs import combine_keys, split_keys

__all__ = [
    "PostgresAdvisoryLockKey",
    "KeyEncoding",
    "hash_string",
    "combine_keys",
    "split_keys",
    "AdvisoryLockKeyError",
    "UnencodableNameError",
    "InvariantViolation",
]

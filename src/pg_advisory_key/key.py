from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from .ascii_codec import MAX_ASCII_LENGTH, decode_ascii, try_encode_ascii
from .exceptions import UnencodableNameError, require
from .hex_codec import (
    HASH_PART_LENGTH,
    HASH_STRING_LENGTH,
    HASH_STRING_SEPARATOR,
    SEPARATED_HASH_STRING_LENGTH,
    format_int64,
    format_pair,
    try_parse_hash_string,
)
from .hashing import hash_string
from .pairs import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    combine_keys,
    split_keys,
)

log = logging.getLogger(__name__)


class KeyEncoding(Enum):
    """How a key's 64-bit payload was produced."""

    INT64 = 0
    INT32_PAIR = 1
    ASCII = 2


def _check_int(value: object, low: int, high: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, got {type(value).__name__}")
    if not low <= value <= high:
        raise ValueError(f"{what}={value} is outside the range [{low}, {high}]")
    return value


def _unencodable_message(name: str) -> str:
    part = "X" * HASH_PART_LENGTH
    return (
        f"Name {name!r} could not be encoded as a PostgresAdvisoryLockKey. "
        "Please specify allow_hashing=True or use one of the following formats:"
        f" (1) a 0-{MAX_ASCII_LENGTH} character string using only ASCII characters"
        f", (2) a {HASH_STRING_LENGTH} character hex string, such as the result of "
        f"format(2**63 - 1, '0{HASH_STRING_LENGTH}x')"
        f", or (3) a 2-part, {SEPARATED_HASH_STRING_LENGTH} character string of the form "
        f"{part}{HASH_STRING_SEPARATOR}{part}, where the X's are {HASH_PART_LENGTH} "
        f"digit hex strings such as the result of format(2**31 - 1, '0{HASH_PART_LENGTH}x')."
        " Each unique string in formats 1 and 2 maps to a unique key, with no collisions"
        " across formats. Format 3 strings use the same key space as 2."
        " With allow_hashing=True any other string is accepted and hashed."
    )


def _encode_name(name: str, allow_hashing: bool) -> tuple[int, KeyEncoding]:
    """
    Resolve a name to ``(raw, encoding)``.

    Order matters: ASCII packing, then the printed hex forms, then hashing.
    """
    if name is None:
        raise TypeError("name must not be None")
    if not isinstance(name, str):
        raise TypeError(f"name must be a str, got {type(name).__name__}")

    raw = try_encode_ascii(name)
    if raw is not None:
        return raw, KeyEncoding.ASCII

    parsed = try_parse_hash_string(name)
    if parsed is not None:
        raw, has_separator = parsed
        return raw, KeyEncoding.INT32_PAIR if has_separator else KeyEncoding.INT64

    if allow_hashing:
        raw = hash_string(name)
        log.debug("hashed advisory lock name %r to %s", name, format_int64(raw))
        return raw, KeyEncoding.INT64

    raise UnencodableNameError(name, _unencodable_message(name))


class PostgresAdvisoryLockKey:
    """
    Identifier for a PostgreSQL advisory lock.

    PostgreSQL accepts either one ``bigint`` or two ``int`` arguments for
    ``pg_advisory_lock`` and friends. A key remembers which of the two it must
    be passed as; check `uses_single_argument_form`, then read `key` or
    `keys` (or just use `sql_arguments`).

    Construction
    ------------
    - ``PostgresAdvisoryLockKey(key)``: a signed 64-bit integer.
    - ``PostgresAdvisoryLockKey(key1, key2)``: two signed 32-bit integers.
    - ``PostgresAdvisoryLockKey(name, allow_hashing=False)``: a string. Names of
      up to 9 ASCII characters are packed exactly, and the output of
      ``str(key)`` parses back to the same key. Any other name raises
      UnencodableNameError unless ``allow_hashing=True``, in which case it is
      hashed with SHA-1 (see `hash_string`).

    Equality
    --------
    Two keys are equal when their 64-bit payloads match and they use the same
    argument form. A packed ASCII name and an integer pair with the same bits
    are the same lock; a single ``bigint`` with those bits is not.

    Example
    -------
    >>> key = PostgresAdvisoryLockKey("stock")
    >>> cursor.execute(
    ...     "SELECT pg_advisory_lock(%s, %s);", key.sql_arguments()
    ... )
    """

    __slots__ = ("_raw", "_encoding")

    def __init__(
        self,
        key: int | str | None,
        key2: int | None = None,
        *,
        allow_hashing: bool = False,
    ) -> None:
        if key is None or isinstance(key, str):
            if key2 is not None:
                raise TypeError("a second key is only accepted with an integer pair")
            raw, encoding = _encode_name(key, allow_hashing)
        else:
            if allow_hashing:
                raise TypeError("allow_hashing only applies to string names")
            if key2 is None:
                raw = _check_int(key, INT64_MIN, INT64_MAX, "key")
                encoding = KeyEncoding.INT64
            else:
                raw = combine_keys(
                    _check_int(key, INT32_MIN, INT32_MAX, "key1"),
                    _check_int(key2, INT32_MIN, INT32_MAX, "key2"),
                )
                encoding = KeyEncoding.INT32_PAIR

        object.__setattr__(self, "_raw", raw)
        object.__setattr__(self, "_encoding", encoding)

    @classmethod
    def from_int64(cls, key: int) -> PostgresAdvisoryLockKey:
        return cls(key)

    @classmethod
    def from_pair(cls, key1: int, key2: int) -> PostgresAdvisoryLockKey:
        return cls(key1, key2)

    @classmethod
    def from_name(
        cls, name: str, allow_hashing: bool = False
    ) -> PostgresAdvisoryLockKey:
        return cls(name, allow_hashing=allow_hashing)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(
        self,
    ) -> tuple[Callable[..., PostgresAdvisoryLockKey], tuple[int, KeyEncoding]]:
        return _restore, (self._raw, self._encoding)

    @property
    def raw(self) -> int:
        """The signed 64-bit payload, whatever the encoding."""
        return self._raw

    @property
    def encoding(self) -> KeyEncoding:
        return self._encoding

    @property
    def uses_single_argument_form(self) -> bool:
        """True when the key must be passed as one ``bigint`` argument."""
        return self._encoding is KeyEncoding.INT64

    @property
    def key(self) -> int:
        require(
            self.uses_single_argument_form,
            "key is only available in the single-argument form; use keys",
        )
        return self._raw

    @property
    def keys(self) -> tuple[int, int]:
        require(
            not self.uses_single_argument_form,
            "keys is only available in the two-argument form; use key",
        )
        return split_keys(self._raw)

    def sql_arguments(self) -> tuple[int, ...]:
        """Positional parameters for ``pg_advisory_lock`` and related calls."""
        if self.uses_single_argument_form:
            return (self.key,)
        return self.keys

    def _identity(self) -> tuple[int, bool]:
        return self._raw, self.uses_single_argument_form

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PostgresAdvisoryLockKey):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __str__(self) -> str:
        if self._encoding is KeyEncoding.INT64:
            return format_int64(self._raw)
        if self._encoding is KeyEncoding.INT32_PAIR:
            return format_pair(*split_keys(self._raw))
        if self._encoding is KeyEncoding.ASCII:
            return decode_ascii(self._raw)
        raise ValueError(f"unknown key encoding {self._encoding!r}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


def _restore(raw: int, encoding: KeyEncoding) -> PostgresAdvisoryLockKey:
    key = PostgresAdvisoryLockKey.__new__(PostgresAdvisoryLockKey)
    object.__setattr__(key, "_raw", raw)
    object.__setattr__(key, "_encoding", encoding)
    return key

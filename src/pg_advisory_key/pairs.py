"""
Reversible packing of two signed 32-bit integers into one signed 64-bit one.

PostgreSQL exposes advisory locks both as ``pg_advisory_lock(bigint)`` and
``pg_advisory_lock(int, int)``. Keys for the second form are stored as a
single 64-bit payload: the first integer in the high half, the second in the
low half.
"""

from __future__ import annotations

INT32_BITS = 32
INT64_BITS = 64

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_UINT32_MASK = (1 << INT32_BITS) - 1
_UINT64_MASK = (1 << INT64_BITS) - 1


def to_int32(value: int) -> int:
    """Reinterpret the low 32 bits of ``value`` as a signed integer."""
    value &= _UINT32_MASK
    if value > INT32_MAX:
        value -= 1 << INT32_BITS
    return value


def to_int64(value: int) -> int:
    """Reinterpret the low 64 bits of ``value`` as a signed integer."""
    value &= _UINT64_MASK
    if value > INT64_MAX:
        value -= 1 << INT64_BITS
    return value


def to_uint64(value: int) -> int:
    """Two's-complement bit pattern of a signed 64-bit integer."""
    return value & _UINT64_MASK


def combine_keys(key1: int, key2: int) -> int:
    """
    Combine two 32-bit integers into one signed 64-bit integer.

    The bit pattern of ``key1`` becomes the high 32 bits and the bit pattern
    of ``key2`` the low 32 bits. Negative inputs are taken by their
    two's-complement bits; anything beyond 32 bits wraps.

    Parameters
    ----------
    key1 : int
        High half.
    key2 : int
        Low half.

    Returns
    -------
    int
        Signed 64-bit integer.
    """
    return to_int64(((key1 & _UINT32_MASK) << INT32_BITS) | (key2 & _UINT32_MASK))


def split_keys(key: int) -> tuple[int, int]:
    """Inverse of `combine_keys`: ``split_keys(combine_keys(a, b)) == (a, b)``."""
    return to_int32(key >> INT32_BITS), to_int32(key)

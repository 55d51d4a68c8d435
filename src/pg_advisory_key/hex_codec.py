"""
Canonical hex text for advisory lock keys.

A key prints as two 8-digit lowercase hex halves: ``0000002a00000007`` for a
single 64-bit key, ``0000002a,00000007`` for a paired one. Both forms parse
back into the same key, so any printed key is a valid input.
"""

from __future__ import annotations

import re

from .pairs import combine_keys, to_uint64

HASH_STRING_SEPARATOR = ","
HASH_PART_LENGTH = 8
HASH_STRING_LENGTH = 2 * HASH_PART_LENGTH
SEPARATED_HASH_STRING_LENGTH = HASH_STRING_LENGTH + 1

# int(..., 16) also accepts signs, whitespace, underscores and "0x"
_HASH_PART = re.compile(r"[0-9a-fA-F]{%d}" % HASH_PART_LENGTH)


def _parse_part(text: str) -> int | None:
    if _HASH_PART.fullmatch(text) is None:
        return None
    return int(text, 16)


def try_parse_hash_string(name: str) -> tuple[int, bool] | None:
    """
    Parse a 16 or 17 character hex string.

    Returns
    -------
    tuple[int, bool] | None
        ``(key, has_separator)`` where ``key`` is a signed 64-bit integer, or
        None when ``name`` is not in either hex form.
    """
    if (
        len(name) == SEPARATED_HASH_STRING_LENGTH
        and name[HASH_PART_LENGTH] == HASH_STRING_SEPARATOR
    ):
        has_separator = True
    elif len(name) == HASH_STRING_LENGTH:
        has_separator = False
    else:
        return None

    key1 = _parse_part(name[:HASH_PART_LENGTH])
    key2 = _parse_part(name[-HASH_PART_LENGTH:])
    if key1 is None or key2 is None:
        return None

    return combine_keys(key1, key2), has_separator


def format_int64(key: int) -> str:
    return format(to_uint64(key), "0%dx" % HASH_STRING_LENGTH)


def format_pair(key1: int, key2: int) -> str:
    width = "0%dx" % HASH_PART_LENGTH
    return (
        format(key1 & 0xFFFFFFFF, width)
        + HASH_STRING_SEPARATOR
        + format(key2 & 0xFFFFFFFF, width)
    )

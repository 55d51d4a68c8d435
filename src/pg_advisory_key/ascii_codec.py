"""
Lossless packing of short ASCII names into a 64-bit advisory lock key.

Each character takes 7 bits, so 9 characters fill 63 bits. To tell apart
strings of different lengths (``""`` vs ``"\\0"``), the character data is
followed by a single 0 bit and then one group of seven 1 bits per unused
character slot:

    <7 bits x length> 0 <1111111 x (9 - length)>

which is always exactly 64 bits. Decoding strips the trailing all-ones
groups to recover the length.
"""

from __future__ import annotations

from .exceptions import require
from .pairs import to_int64, to_uint64

ASCII_CHAR_BITS = 7
MAX_ASCII_VALUE = (1 << ASCII_CHAR_BITS) - 1
MAX_ASCII_LENGTH = 64 // ASCII_CHAR_BITS


def try_encode_ascii(name: str) -> int | None:
    """
    Pack ``name`` into a signed 64-bit integer.

    Returns None when ``name`` is longer than `MAX_ASCII_LENGTH` characters or
    contains a character above code point 127. The null character is allowed.
    """
    if len(name) > MAX_ASCII_LENGTH:
        return None

    result = 0
    for char in name:
        code = ord(char)
        if code > MAX_ASCII_VALUE:
            return None
        result = (result << ASCII_CHAR_BITS) | code

    # padding: one 0 bit, then a full group of 1s per unused slot
    result <<= 1
    for _ in range(len(name), MAX_ASCII_LENGTH):
        result = (result << ASCII_CHAR_BITS) | MAX_ASCII_VALUE

    return to_int64(result)


def decode_ascii(key: int) -> str:
    """Recover the name packed by `try_encode_ascii`."""
    remaining = to_uint64(key)

    length = MAX_ASCII_LENGTH
    while (remaining & MAX_ASCII_VALUE) == MAX_ASCII_VALUE:
        length -= 1
        remaining >>= ASCII_CHAR_BITS
    require((remaining & 1) == 0, "last padding bit should be zero")
    remaining >>= 1

    chars = [""] * length
    for i in range(length - 1, -1, -1):
        chars[i] = chr(remaining & MAX_ASCII_VALUE)
        remaining >>= ASCII_CHAR_BITS

    return "".join(chars)

import hashlib

from .pairs import to_int64


def hash_string(name: str) -> int:
    """
    Convert an arbitrary string into a stable signed 64-bit integer.

    This is the fallback used by ``PostgresAdvisoryLockKey(name,
    allow_hashing=True)`` when the name has no exact encoding. It is exposed
    for callers that want the raw value without building a key.

    Implementation details
    ----------------------
    We use SHA-1 over the UTF-8 bytes of the name and keep the first 8 bytes
    of the 20-byte digest. Truncation lowers collision resistance to that of a
    64-bit hash, which is all the advisory lock key space can hold anyway.

    The 8 bytes are read little-endian (byte 0 least significant). The bytes
    are shifted in one at a time rather than loaded through a native integer
    conversion, so the value is identical on every platform and matches keys
    produced by other implementations of this scheme.

    Parameters
    ----------
    name : str
        Arbitrary lock name.

    Returns
    -------
    int
        Signed 64-bit integer suitable for pg_advisory_lock(bigint).
    """
    digest = hashlib.sha1(name.encode("utf-8")).digest()

    result = 0
    for i in range(7, -1, -1):
        result = (result << 8) | digest[i]

    # Convert unsigned -> signed int64 range
    return to_int64(result)

import pytest

from pg_advisory_key.hex_codec import format_int64, format_pair, try_parse_hash_string
from pg_advisory_key.pairs import INT64_MAX, INT64_MIN, combine_keys


def test_format_int64_is_sixteen_lowercase_digits():
    assert format_int64(42) == "000000000000002a"
    assert format_int64(-1) == "ffffffffffffffff"
    assert format_int64(INT64_MIN) == "8000000000000000"
    assert format_int64(INT64_MAX) == "7fffffffffffffff"


def test_format_pair_uses_separator():
    assert format_pair(1, 2) == "00000001,00000002"
    assert format_pair(-1, -2) == "ffffffff,fffffffe"


def test_parse_single():
    assert try_parse_hash_string("000000000000002a") == (42, False)
    assert try_parse_hash_string("ffffffffffffffff") == (-1, False)


def test_parse_pair():
    assert try_parse_hash_string("00000001,00000002") == (combine_keys(1, 2), True)
    assert try_parse_hash_string("ffffffff,fffffffe") == (combine_keys(-1, -2), True)


def test_parse_is_case_insensitive():
    assert try_parse_hash_string("FFFFFFFF,FFFFFFFE") == try_parse_hash_string(
        "ffffffff,fffffffe"
    )
    assert try_parse_hash_string("000000000000002A") == (42, False)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "2a",
        "000000000000002",
        "0000000000000002a0",
        "00000001;00000002",
        "0000000g00000000",
        "0000000g,00000000",
        "0x00000100000002",
        "+0000001,00000002",
        " 0000001,00000002",
        "0000_001,00000002",
        "00000001,0000000١",
    ],
)
def test_parse_rejects_malformed(text):
    assert try_parse_hash_string(text) is None

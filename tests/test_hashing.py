from pg_advisory_key.hashing import hash_string
from pg_advisory_key.pairs import INT64_MAX, INT64_MIN


def test_same_name_same_value():
    assert hash_string("stock:ABC") == hash_string("stock:ABC")


def test_different_names_different_values():
    assert hash_string("stock:ABC") != hash_string("stock:XYZ")


def test_returns_int_in_int64_range():
    value = hash_string("test")
    assert isinstance(value, int)
    assert INT64_MIN <= value <= INT64_MAX


def test_empty_string_known_value():
    # sha1("") = da39a3ee5e6b4b0d..., first 8 bytes read little-endian
    assert hash_string("") == 0x0D4B6B5EEEA339DA


def test_abc_known_value():
    # sha1("abc") = a9993e364706816a...
    assert hash_string("abc") == 0x6A810647363E99A9


def test_high_bit_set_gives_negative_value():
    # sha1("abcdefghij") = d68c19a0a345b7ea...
    assert hash_string("abcdefghij") == 0xEAB745A3A0198CD6 - 2**64


def test_hashes_utf8_bytes():
    assert hash_string("ключ") == hash_string("ключ")
    assert hash_string("ключ") != hash_string("kluch")

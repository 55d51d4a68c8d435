import pytest

from pg_advisory_key.pairs import (
    INT32_MAX,
    INT32_MIN,
    INT64_MIN,
    combine_keys,
    split_keys,
)

BOUNDARIES = [INT32_MIN, INT32_MIN + 1, -2, -1, 0, 1, 2, 42, INT32_MAX - 1, INT32_MAX]


@pytest.mark.parametrize("key1", BOUNDARIES)
@pytest.mark.parametrize("key2", BOUNDARIES)
def test_split_inverts_combine(key1, key2):
    assert split_keys(combine_keys(key1, key2)) == (key1, key2)


def test_combine_places_first_key_in_high_bits():
    assert combine_keys(1, 2) == (1 << 32) | 2
    assert combine_keys(0, 42) == 42


def test_negative_low_key_is_not_sign_extended():
    assert combine_keys(0, -1) == 0xFFFFFFFF


def test_negative_high_key_makes_negative_result():
    assert combine_keys(-1, 0) == -(2**32)
    assert combine_keys(-1, -1) == -1
    assert combine_keys(INT32_MIN, 0) == INT64_MIN


def test_combine_wraps_out_of_range_input():
    assert combine_keys(2**32 + 5, 0) == 5 << 32


def test_split_signed_halves():
    assert split_keys(-1) == (-1, -1)
    assert split_keys(0xFFFFFFFF) == (0, -1)
    assert split_keys(INT64_MIN) == (INT32_MIN, 0)

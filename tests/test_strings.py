import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.strings import (
    add_binary,
    are_anagrams,
    are_rotations,
    my_atoi,
    trim_leading_zeros,
)

INT32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


@given(INT32)
def test_atoi_round_trips_int32(n):
    assert my_atoi(str(n)) == n


def test_atoi_negative_number():
    assert my_atoi("-123") == -123


def test_atoi_skips_spaces_and_stops_at_non_digit():
    assert my_atoi("   42abc") == 42


def test_atoi_clamps_to_int32():
    assert my_atoi("99999999999") == 2**31 - 1
    assert my_atoi("-99999999999") == -(2**31)


@given(st.integers(min_value=2**31, max_value=10**30))
def test_atoi_clamps_large_positive(n):
    assert my_atoi(str(n)) == 2**31 - 1


@given(st.integers(min_value=2**31 + 1, max_value=10**30))
def test_atoi_clamps_large_negative(n):
    assert my_atoi(str(-n)) == -(2**31)


def test_atoi_sign_only_accepted_as_first_character():
    assert my_atoi(" -7") == my_atoi("+7") == my_atoi("abc") == 0


def test_trim_leading_zeros():
    assert trim_leading_zeros("00101") == "101"
    assert trim_leading_zeros("0000") == "0"


@given(st.integers(min_value=0, max_value=2**80), st.integers(min_value=0, max_value=2**80))
def test_add_binary_matches_integer_sum(x, y):
    result = add_binary(format(x, "b"), format(y, "b"))
    assert int(result, 2) == x + y
    assert result == "0" or result.startswith("1")


@given(st.integers(min_value=0, max_value=2**40), st.integers(min_value=0, max_value=5))
def test_add_binary_ignores_leading_zeros(x, pad):
    padded = "0" * pad + format(x, "b")
    assert add_binary(padded, "0") == format(x, "b")


def test_add_binary_example():
    assert add_binary("0011", "0") == "11"
    assert add_binary("1101", "111") == "10100"


def test_add_binary_rejects_non_binary():
    with pytest.raises(ValueError):
        add_binary("12", "1")


def test_anagram_examples():
    assert are_anagrams("geeks", "kseeg") is True
    assert are_anagrams("allergy", "allergic") is False


@given(st.text(max_size=30))
def test_anagram_of_reordering(s):
    assert are_anagrams(s, "".join(sorted(s))) is True
    assert are_anagrams(s, s[::-1]) is True


@given(st.text(max_size=30))
def test_anagram_needs_same_length(s):
    assert are_anagrams(s, s + "x") is False


def test_rotation_examples():
    assert are_rotations("abcd", "cdab") is True
    assert are_rotations("abcd", "acbd") is False


@given(st.text(min_size=1, max_size=30), st.integers(min_value=0, max_value=30))
def test_every_rotation_is_detected(s, shift):
    k = shift % len(s)
    assert are_rotations(s, s[k:] + s[:k]) is True
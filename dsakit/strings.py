"""String routines: integer parsing, binary addition, anagram and rotation checks."""

from collections import Counter

_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)


def my_atoi(s: str) -> int:
    """Parse a leading decimal integer from ``s``, clamped to the 32-bit signed range.

    Leading spaces are skipped. A minus sign counts only as the very first
    character of ``s``; a plus sign is not accepted. Parsing stops at the
    first character that is not a digit.
    """
    negative = s.startswith("-")
    body = s[1:] if negative else s.lstrip(" ")
    value = 0
    for ch in body:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
        if negative and -value < _INT_MIN:
            return _INT_MIN
        if not negative and value > _INT_MAX:
            return _INT_MAX
    return -value if negative else value


def trim_leading_zeros(s: str) -> str:
    """Drop everything before the first ``'1'``; ``"0"`` if there is none."""
    first_one = s.find("1")
    return "0" if first_one == -1 else s[first_one:]


def _as_binary(s: str) -> int:
    digits = trim_leading_zeros(s)
    if set(digits) - {"0", "1"}:
        raise ValueError(f"not a binary string: {s!r}")
    return int(digits, 2)


def add_binary(a: str, b: str) -> str:
    """Add two binary strings and return the sum without leading zeros."""
    return format(_as_binary(a) + _as_binary(b), "b")


def are_anagrams(s: str, t: str) -> bool:
    """Return True if ``s`` and ``t`` hold the same characters with the same counts."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def are_rotations(s1: str, s2: str) -> bool:
    """Return True if ``s2`` occurs inside ``s1`` written twice over."""
    return s2 in s1 + s1
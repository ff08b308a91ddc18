"""Small string helpers used when parsing commands and environment values."""

from __future__ import annotations

from itertools import zip_longest

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be exactly one character")
    return [word for word in text.split(sep) if word]


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's ``atoi`` does.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. The result wraps to a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    value = sign * int("".join(digits) or "0")
    modulus = 1 << _INT_BITS
    value %= modulus
    if value >= modulus // 2:
        value -= modulus
    return value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def strtrim(text: str, charset: str | None) -> str:
    """Strip every character of ``charset`` from both ends of ``text``.

    A ``charset`` of ``None`` leaves the text unchanged.
    """
    if charset is None:
        return text
    return text.strip(charset)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the first match, or ``None`` when there is none.
    An empty needle matches at index 0.
    """
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``."""
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns zero when they are equal over that span, otherwise the difference
    between the code points of the first differing characters, where the end
    of a string counts as code point zero.
    """
    _check_non_negative("n", n)
    for char_a, char_b in zip_longest(a[:n], b[:n], fillvalue="\0"):
        if char_a != char_b:
            return ord(char_a) - ord(char_b)
        if char_a == "\0":
            return 0
    return 0
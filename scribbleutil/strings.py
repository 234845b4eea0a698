"""String comparison and whitespace stripping helpers.

Whitespace here means every character from 0x00 to 0x20, matching the
classification in :mod:`scribbleutil.charutil`.  Case-insensitive
comparisons fold ASCII letters only, independent of the locale.
"""

from __future__ import annotations

_WHITESPACE_NOT_NULL = "".join(chr(c) for c in range(0x01, 0x21))
_WHITESPACE_OR_NULL = "\0" + _WHITESPACE_NOT_NULL

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _fold(s: str) -> str:
    return s.translate(_ASCII_LOWER)


def strip_left(s: str) -> str:
    """Remove leading whitespace; a null character stops the scan."""
    return s.lstrip(_WHITESPACE_NOT_NULL)


def strip_right(s: str) -> str:
    """Remove trailing whitespace and null characters."""
    return s.rstrip(_WHITESPACE_OR_NULL)


def strip(s: str) -> str:
    """Strip whitespace on both sides."""
    return strip_right(strip_left(s))


def string_compare(a: str, b: str) -> int:
    """Three-way comparison: negative, zero or positive."""
    return (a > b) - (a < b)


def string_is_equal_ignore_case(a: str, b: str) -> bool:
    return _fold(a) == _fold(b)


def string_starts_with(haystack: str, needle: str) -> bool:
    return haystack.startswith(needle)


def string_ends_with(haystack: str, needle: str) -> bool:
    return haystack.endswith(needle)


def string_ends_with_ignore_case(haystack: str, needle: str) -> bool:
    return _fold(haystack).endswith(_fold(needle))


def string_after_prefix(haystack: str, needle: str) -> str | None:
    """Return the part of *haystack* after *needle*, or None if it does not start with it."""
    if haystack.startswith(needle):
        return haystack[len(needle):]
    return None


def string_starts_with_ignore_case(haystack: str, needle: str) -> bool:
    return _fold(haystack).startswith(_fold(needle))


def string_after_prefix_ignore_case(haystack: str, needle: str) -> str | None:
    """Like :func:`string_after_prefix`, folding ASCII case."""
    if string_starts_with_ignore_case(haystack, needle):
        return haystack[len(needle):]
    return None


def find_string_suffix(p: str, suffix: str) -> int | None:
    """Return the index where *suffix* begins in *p*, or None if *p* does not end with it."""
    if p.endswith(suffix):
        return len(p) - len(suffix)
    return None
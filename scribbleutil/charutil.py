"""Locale-independent classification and case mapping of single ASCII characters.

Every function accepts either a one-character string or an integer
character code (as produced by iterating over ``bytes``).  The case
mapping functions return a value of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]


def _code(ch: Char) -> int:
    if isinstance(ch, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(ch, int):
        if ch < 0:
            raise ValueError(f"negative character code: {ch}")
        return ch
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {len(ch)}")
        return ord(ch)
    raise TypeError(f"expected a character or an integer code, not {type(ch).__name__}")


def is_ascii(ch: Char) -> bool:
    """Is this a 7-bit ASCII character?"""
    return _code(ch) < 0x80


def is_whitespace_or_null(ch: Char) -> bool:
    """Is this a control/space character (0x00..0x20), the null character included?"""
    return _code(ch) <= 0x20


def is_whitespace_not_null(ch: Char) -> bool:
    """Is this a control/space character (0x01..0x20), excluding the null character?"""
    return 0 < _code(ch) <= 0x20


def is_whitespace_fast(ch: Char) -> bool:
    """Whitespace test that does not care whether the null character matches."""
    return is_whitespace_or_null(ch)


def is_printable_ascii(ch: Char) -> bool:
    """Is this an ASCII character at or above 0x20 (0x7f included)?"""
    return 0x20 <= _code(ch) < 0x80


def is_digit_ascii(ch: Char) -> bool:
    return ord("0") <= _code(ch) <= ord("9")


def is_upper_alpha_ascii(ch: Char) -> bool:
    return ord("A") <= _code(ch) <= ord("Z")


def is_lower_alpha_ascii(ch: Char) -> bool:
    return ord("a") <= _code(ch) <= ord("z")


def is_alpha_ascii(ch: Char) -> bool:
    return is_upper_alpha_ascii(ch) or is_lower_alpha_ascii(ch)


def is_alpha_numeric_ascii(ch: Char) -> bool:
    return is_alpha_ascii(ch) or is_digit_ascii(ch)


_CASE_OFFSET = ord("a") - ord("A")


def _same_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def to_upper_ascii(ch: Char) -> Char:
    """Convert an ASCII lower-case letter to upper case, ignoring the locale."""
    code = _code(ch)
    if is_lower_alpha_ascii(code):
        code -= _CASE_OFFSET
    return _same_kind(ch, code)


def to_lower_ascii(ch: Char) -> Char:
    """Convert an ASCII upper-case letter to lower case, ignoring the locale."""
    code = _code(ch)
    if is_upper_alpha_ascii(code):
        code += _CASE_OFFSET
    return _same_kind(ch, code)
import string

import pytest

from scribbleutil.charutil import (
    is_alpha_ascii,
    is_alpha_numeric_ascii,
    is_ascii,
    is_digit_ascii,
    is_lower_alpha_ascii,
    is_printable_ascii,
    is_upper_alpha_ascii,
    is_whitespace_fast,
    is_whitespace_not_null,
    is_whitespace_or_null,
    to_lower_ascii,
    to_upper_ascii,
)

ASCII_CHARS = [chr(c) for c in range(128)]


@pytest.mark.parametrize("ch", ASCII_CHARS)
def test_classification_matches_stdlib_sets(ch):
    assert is_digit_ascii(ch) == (ch in string.digits)
    assert is_upper_alpha_ascii(ch) == (ch in string.ascii_uppercase)
    assert is_lower_alpha_ascii(ch) == (ch in string.ascii_lowercase)
    assert is_alpha_ascii(ch) == (ch in string.ascii_letters)
    assert is_alpha_numeric_ascii(ch) == (ch in string.ascii_letters + string.digits)
    assert is_ascii(ch)


@pytest.mark.parametrize("ch", ASCII_CHARS)
def test_case_mapping_matches_str_methods_for_ascii(ch):
    assert to_upper_ascii(ch) == ch.upper()
    assert to_lower_ascii(ch) == ch.lower()


@pytest.mark.parametrize("ch", ["é", "ß", "Ä", "\u0130"])
def test_case_mapping_ignores_non_ascii(ch):
    assert to_upper_ascii(ch) == ch
    assert to_lower_ascii(ch) == ch
    assert not is_ascii(ch)
    assert not is_alpha_ascii(ch)


def test_integer_codes_are_accepted_and_returned():
    assert to_upper_ascii(ord("a")) == ord("A")
    assert to_lower_ascii(ord("Z")) == ord("z")
    assert [is_digit_ascii(b) for b in b"a1"] == [False, True]


def test_null_is_whitespace_only_in_or_null_variant():
    assert is_whitespace_or_null("\0")
    assert is_whitespace_fast("\0")
    assert not is_whitespace_not_null("\0")


@pytest.mark.parametrize("ch", [" ", "\t", "\n", "\r", "\x01", "\x1f"])
def test_control_and_space_are_whitespace(ch):
    assert is_whitespace_or_null(ch)
    assert is_whitespace_not_null(ch)
    assert is_whitespace_fast(ch)


@pytest.mark.parametrize("ch", ["!", "a", "\x80", "é"])
def test_above_space_is_not_whitespace(ch):
    assert not is_whitespace_or_null(ch)
    assert not is_whitespace_not_null(ch)


def test_printable_boundaries():
    assert is_printable_ascii(" ")
    assert is_printable_ascii("~")
    assert is_printable_ascii("\x7f")
    assert not is_printable_ascii("\x1f")
    assert not is_printable_ascii("\x80")


def test_ascii_boundary():
    assert is_ascii("\x7f")
    assert not is_ascii("\x80")


def test_rejects_multi_character_string():
    with pytest.raises(ValueError):
        is_ascii("ab")


def test_rejects_empty_string():
    with pytest.raises(ValueError):
        to_upper_ascii("")


def test_rejects_other_types():
    with pytest.raises(TypeError):
        is_digit_ascii(3.5)
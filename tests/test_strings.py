import pytest

from scribbleutil.strings import (
    find_string_suffix,
    strip,
    strip_left,
    strip_right,
    string_after_prefix,
    string_after_prefix_ignore_case,
    string_compare,
    string_ends_with,
    string_ends_with_ignore_case,
    string_is_equal_ignore_case,
    string_starts_with,
    string_starts_with_ignore_case,
)


def test_strip_left_removes_leading_whitespace_only():
    body = "abc \t"
    assert strip_left("\t \n\r" + body) == body


def test_strip_left_stops_at_null():
    s = "\0 abc"
    assert strip_left(s) == s


def test_strip_right_removes_whitespace_and_null():
    body = "  abc"
    assert strip_right(body + " \0\n\t") == body


def test_strip_both_sides():
    body = "a b\tc"
    assert strip(" \t" + body + "\r\n ") == body


def test_strip_all_whitespace_gives_empty():
    assert strip(" \t\r\n ") == ""
    assert strip_left("   ") == ""
    assert strip_right("   ") == ""


@pytest.mark.parametrize("s", ["", "x", "  x  ", "\x01x\x1f", "a\0 "])
def test_strip_is_idempotent(s):
    once = strip(s)
    assert strip(once) == once


def test_non_ascii_space_is_kept():
    s = "\u00a0abc\u00a0"
    assert strip(s) == s


def test_string_compare_sign():
    assert string_compare("abc", "abc") == 0
    assert string_compare("abc", "abd") < 0
    assert string_compare("abd", "abc") > 0
    assert string_compare("ab", "abc") < 0


@pytest.mark.parametrize("a,b", [("a", "b"), ("", "x"), ("xyz", "xy"), ("Q", "q")])
def test_string_compare_antisymmetric(a, b):
    assert string_compare(a, b) == -string_compare(b, a)


def test_equal_ignore_case_folds_ascii():
    assert string_is_equal_ignore_case("HeLLo", "hello")
    assert not string_is_equal_ignore_case("hello", "hellO!")


def test_equal_ignore_case_does_not_fold_non_ascii():
    assert not string_is_equal_ignore_case("ÄB", "äb")


def test_starts_and_ends_with():
    assert string_starts_with("--verbose", "--")
    assert not string_starts_with("-v", "--")
    assert string_ends_with("song.mp3", ".mp3")
    assert not string_ends_with("song.mp3", ".MP3")
    assert string_ends_with_ignore_case("song.mp3", ".MP3")


def test_starts_with_empty_needle():
    assert string_starts_with("anything", "")
    assert string_starts_with_ignore_case("", "")


def test_after_prefix():
    prefix, rest = "--", "verbose=1"
    assert string_after_prefix(prefix + rest, prefix) == rest
    assert string_after_prefix(rest, prefix) is None


def test_after_prefix_whole_string():
    assert string_after_prefix("abc", "abc") == ""


def test_after_prefix_ignore_case():
    rest = " text/plain"
    assert string_after_prefix_ignore_case("Content-Type:" + rest, "content-type:") == rest
    assert string_after_prefix_ignore_case("Content-Length: 3", "content-type:") is None


def test_find_string_suffix():
    stem, suffix = "file", ".txt"
    assert find_string_suffix(stem + suffix, suffix) == len(stem)
    assert find_string_suffix(stem, suffix) is None


def test_find_string_suffix_empty_suffix_points_to_end():
    s = "abc"
    assert find_string_suffix(s, "") == len(s)


def test_find_string_suffix_longer_than_string():
    assert find_string_suffix("a", "abc") is None
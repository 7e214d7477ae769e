"""Tests for pathedit.path."""

import pytest

from pathedit.errors import InvalidPathError
from pathedit.path import format_path, looks_like_index, parse_path, require_path


# ---------------------------------------------------------------------------
# parse_path
# ---------------------------------------------------------------------------

def test_parse_dotted():
    assert parse_path("a.b.c") == ("a", "b", "c")

def test_parse_brackets():
    assert parse_path("a.b[0].c") == ("a", "b", "0", "c")

def test_parse_bracket_key():
    assert parse_path("a[b].c") == parse_path("a.b.c")

def test_parse_single_segment():
    assert parse_path("count") == ("count",)

def test_parse_unbalanced_brackets_ignored():
    assert parse_path("a[0.b]]c") == ("a", "0", "b", "c")

def test_parse_consecutive_separators_skip_empty():
    assert parse_path("a..b[][1]") == ("a", "b", "1")

def test_parse_separators_only():
    assert parse_path(".[]") == ()

def test_parse_keeps_spaces_and_dashes():
    assert parse_path("my key.x-y") == ("my key", "x-y")


@pytest.mark.parametrize("bad", ["", None, 3, ["a"], b"a.b"])
def test_parse_rejects_non_string_or_empty(bad):
    with pytest.raises(InvalidPathError, match="non-empty string"):
        parse_path(bad)


def test_require_path_returns_input():
    assert require_path("a.b") == "a.b"


# ---------------------------------------------------------------------------
# looks_like_index / format_path
# ---------------------------------------------------------------------------

class TestLooksLikeIndex:
    def test_digits(self):
        assert looks_like_index("0")
        assert looks_like_index("42")

    def test_words(self):
        assert not looks_like_index("a")
        assert not looks_like_index("1a")

    def test_negative_and_float(self):
        assert not looks_like_index("-1")
        assert not looks_like_index("1.5")

    def test_whitespace(self):
        assert not looks_like_index(" 1")


@pytest.mark.parametrize("segment", ["0\n", "1\n", "٣", "１", "1٣", "", "+1"])
def test_looks_like_index_rejects_non_ascii_decimal(segment):
    assert not looks_like_index(segment)


def test_format_path():
    assert format_path(("a", "b", "0")) == "a.b.0"
    assert format_path([]) == ""

# tests/test_delimiter.py
from __future__ import annotations

import pytest

from strsplit.delimiter import (
    WHITESPACE,
    CharDelimiter,
    DelimiterError,
    DelimiterTypeError,
    LiteralDelimiter,
    as_delimiter,
)
from strsplit.types import Delimiter

"""
Tests: strsplit/delimiter.py

Covers:
- literal runs, including windowed search and relative offsets
- empty literal → whitespace mode (Unicode White_Space, not str.isspace)
- single-codepoint matching, including non-ASCII codepoints
- construction errors and str → delimiter coercion
"""


# ──────────────────────────────────────────────────────────────────────────────
# LiteralDelimiter
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "literal,text,expected",
    [
        (" ", "a b", (1, 2)),
        (", ", "x, y, z", (1, 3)),
        ("--", "a---b", (1, 3)),         # leftmost-first
        ("ab", "abab", (0, 2)),          # match at the very start
        ("zz", "abc", None),
        (" ", "", None),                 # empty window never matches
    ],
)
def test_literal_find_next(literal, text, expected):
    assert LiteralDelimiter(literal).find_next(text) == expected


def test_literal_offsets_are_relative_to_window():
    d = LiteralDelimiter(", ")
    # window "y, z" starts at 3; the match sits at absolute 4
    assert d.find_next("x, y, z", 3) == (1, 3)
    # window "x" cannot see the delimiter right after it
    assert d.find_next("x, y, z", 0, 1) is None
    # a window starting past the end is empty
    assert d.find_next("x, y, z", 7) is None


@pytest.mark.parametrize(
    "text,expected",
    [
        ("ab\tc", (2, 3)),
        ("ab\nc", (2, 3)),
        ("a\xa0b", (1, 2)),            # no-break space
        ("\u3000x", (0, 1)),             # ideographic space
        ("abc", None),
        ("a\x1fb", None),                # unit separator: isspace() but not White_Space
    ],
)
def test_empty_literal_splits_on_whitespace(text, expected):
    d = LiteralDelimiter("")
    assert d.whitespace_mode is True
    assert d.find_next(text) == expected


def test_whitespace_set_matches_unicode_property():
    assert "\u3000" in WHITESPACE and "\t" in WHITESPACE and "\xa0" in WHITESPACE
    assert not any(ch in WHITESPACE for ch in "\x1c\x1d\x1e\x1f")
    assert len(WHITESPACE) == 25


# ──────────────────────────────────────────────────────────────────────────────
# CharDelimiter
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "char,text,expected",
    [
        (",", "apple,banana", (5, 6)),
        ("é", "café au lait", (3, 4)),
        ("\U0001f34e", "x\U0001f34ey", (1, 2)),  # astral codepoint is one index wide
        (",", "no commas", None),
        (",", "", None),
    ],
)
def test_char_find_next(char, text, expected):
    assert CharDelimiter(char).find_next(text) == expected


def test_char_respects_window_end():
    assert CharDelimiter(",").find_next("a,b,c", 2) == (1, 2)
    assert CharDelimiter(",").find_next("a,b,c", 2, 3) is None


def test_char_rejects_bad_values():
    with pytest.raises(DelimiterError):
        CharDelimiter("ab")
    with pytest.raises(DelimiterError):
        CharDelimiter("")
    with pytest.raises(DelimiterTypeError):
        CharDelimiter(44)  # type: ignore[arg-type]


def test_literal_rejects_non_str():
    with pytest.raises(DelimiterTypeError):
        LiteralDelimiter(None)  # type: ignore[arg-type]


# ──────────────────────────────────────────────────────────────────────────────
# Equality, protocol, coercion
# ──────────────────────────────────────────────────────────────────────────────

def test_value_semantics():
    assert LiteralDelimiter(" ") == LiteralDelimiter(" ")
    assert CharDelimiter(",") != CharDelimiter(";")
    assert LiteralDelimiter(",") != CharDelimiter(",")
    assert len({CharDelimiter(","), CharDelimiter(",")}) == 1
    assert repr(CharDelimiter(",")) == "CharDelimiter(',')"


def test_builtins_satisfy_protocol():
    assert isinstance(LiteralDelimiter(""), Delimiter)
    assert isinstance(CharDelimiter("x"), Delimiter)


def test_as_delimiter_coercion():
    assert as_delimiter(" ") == LiteralDelimiter(" ")
    assert as_delimiter("") == LiteralDelimiter("")
    d = CharDelimiter(",")
    assert as_delimiter(d) is d
    with pytest.raises(DelimiterTypeError):
        as_delimiter(3)  # type: ignore[arg-type]

"""
strsplit
========

Does: Lazy, single-pass string tokenization over a pluggable delimiter.
Exports: StrSplit, until_char, LiteralDelimiter, CharDelimiter, as_delimiter,
         Delimiter, Span, and the error types.
Used by: Library callers and the `strsplit-demo` CLI.
"""

from __future__ import annotations

from .delimiter import (
    WHITESPACE,
    CharDelimiter,
    DelimiterError,
    DelimiterTypeError,
    LiteralDelimiter,
    as_delimiter,
)
from .profiles import (
    UnknownProfileError,
    get_profile,
    load_profiles,
    split_with_profile,
)
from .splitter import (
    MatchBoundsError,
    SplitInvariantError,
    StrSplit,
    until_char,
)
from .types import Delimiter, Match, Span

__all__ = [
    # core
    "StrSplit",
    "until_char",
    # delimiters
    "Delimiter",
    "LiteralDelimiter",
    "CharDelimiter",
    "as_delimiter",
    "WHITESPACE",
    # value types
    "Match",
    "Span",
    # profiles
    "load_profiles",
    "get_profile",
    "split_with_profile",
    # errors
    "DelimiterError",
    "DelimiterTypeError",
    "MatchBoundsError",
    "SplitInvariantError",
    "UnknownProfileError",
]
__docformat__ = "google"

# strsplit/delimiter.py

"""
delimiter.py.

Does: Built-in delimiter matchers: literal runs (with the empty-literal
      whitespace mode) and single codepoints, plus coercion of plain strings.
Returns: (start, end) offsets relative to the searched window, or None.
Used by: StrSplit and the profile loader.
"""
from __future__ import annotations

from .types import Delimiter, Match

__all__ = [
    "WHITESPACE",
    "DelimiterError",
    "DelimiterTypeError",
    "LiteralDelimiter",
    "CharDelimiter",
    "as_delimiter",
]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DelimiterError(ValueError):
    """Raise when a delimiter specification has the right type but a bad value."""


class DelimiterTypeError(TypeError):
    """Raise when something that cannot describe a delimiter is passed in."""


# Unicode White_Space property. str.isspace() also accepts U+001C..U+001F.
WHITESPACE: frozenset[str] = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def _window_end(text: str, end: int | None) -> int:
    n = len(text)
    return n if end is None else min(end, n)


# ─────────────────────────────────────────────────────────────────────────────
# Matchers
# ─────────────────────────────────────────────────────────────────────────────


class LiteralDelimiter:
    """
    Does: Match an exact substring. An empty literal switches to whitespace
          mode and matches the next single White_Space codepoint instead.
    Returns: (start, start + len(literal)) or (start, start + 1) in whitespace mode.
    """

    __slots__ = ("_literal",)

    def __init__(self, literal: str) -> None:
        if not isinstance(literal, str):
            raise DelimiterTypeError(
                f"literal delimiter must be str, got {type(literal).__name__}"
            )
        self._literal = literal

    @property
    def literal(self) -> str:
        return self._literal

    @property
    def whitespace_mode(self) -> bool:
        return not self._literal

    def find_next(self, text: str, start: int = 0, end: int | None = None) -> Match | None:
        stop = _window_end(text, end)
        if start >= stop:
            return None

        if not self._literal:
            for i in range(start, stop):
                if text[i] in WHITESPACE:
                    return i - start, i - start + 1
            return None

        i = text.find(self._literal, start, stop)
        if i < 0:
            return None
        return i - start, i - start + len(self._literal)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LiteralDelimiter):
            return NotImplemented
        return self._literal == other._literal

    def __hash__(self) -> int:
        return hash((LiteralDelimiter, self._literal))

    def __repr__(self) -> str:
        return f"LiteralDelimiter({self._literal!r})"


class CharDelimiter:
    """Match the next occurrence of one codepoint."""

    __slots__ = ("_char",)

    def __init__(self, char: str) -> None:
        if not isinstance(char, str):
            raise DelimiterTypeError(f"char delimiter must be str, got {type(char).__name__}")
        if len(char) != 1:
            raise DelimiterError(
                f"char delimiter must be exactly one codepoint, got {len(char)}: {char!r}"
            )
        self._char = char

    @property
    def char(self) -> str:
        return self._char

    def find_next(self, text: str, start: int = 0, end: int | None = None) -> Match | None:
        stop = _window_end(text, end)
        if start >= stop:
            return None
        i = text.find(self._char, start, stop)
        if i < 0:
            return None
        return i - start, i - start + 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CharDelimiter):
            return NotImplemented
        return self._char == other._char

    def __hash__(self) -> int:
        return hash((CharDelimiter, self._char))

    def __repr__(self) -> str:
        return f"CharDelimiter({self._char!r})"


def as_delimiter(spec: Delimiter | str) -> Delimiter:
    """
    Does: Accept a ready Delimiter as-is; wrap a plain str as a literal run.
    Raises: DelimiterTypeError for anything else.
    """
    if isinstance(spec, str):
        return LiteralDelimiter(spec)
    if isinstance(spec, Delimiter):
        return spec
    raise DelimiterTypeError(
        f"expected str or an object with find_next(), got {type(spec).__name__}"
    )

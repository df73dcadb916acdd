# strsplit/splitter.py

"""
splitter.py.

Does: Lazily split a source string on a delimiter, yielding only non-empty
      tokens. Consecutive, leading and trailing delimiters never produce
      empty tokens.
Returns: Tokens as str (via the iterator protocol) or as Span offsets.
Used by: Library callers, delimiter profiles, and the demo CLI.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator

from .delimiter import CharDelimiter, DelimiterError, as_delimiter
from .types import Delimiter, Span
from .utils.log import debug

__all__ = [
    "MatchBoundsError",
    "SplitInvariantError",
    "StrSplit",
    "until_char",
]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)


# ── Exceptions ───────────────────────────────────────────────────────────────
class MatchBoundsError(DelimiterError):
    """Raise when a delimiter returns offsets outside its window or that do not advance."""


class SplitInvariantError(RuntimeError):
    """Raise when a split that must produce a token produced none."""


# ─────────────────────────────────────────────────────────────────────────────
# Splitter
# ─────────────────────────────────────────────────────────────────────────────


class StrSplit:
    """
    Does: Single-pass iterator over the non-empty tokens of `haystack`.
          State is the start offset of the remaining slice, or None once
          exhausted; the slice always runs to the end of `haystack`.
    Returns: Next token on each next(); StopIteration forever after the end.
    Used by: list(StrSplit(...)), for-loops, until_char.

    >>> list(StrSplit("a b c  d e", " "))
    ['a', 'b', 'c', 'd', 'e']
    """

    __slots__ = ("_haystack", "_remainder", "_delimiter")

    def __init__(self, haystack: str, delimiter: Delimiter | str) -> None:
        if not isinstance(haystack, str):
            raise TypeError(f"haystack must be str, got {type(haystack).__name__}")
        self._haystack = haystack
        self._remainder: int | None = 0
        self._delimiter = as_delimiter(delimiter)

    @property
    def delimiter(self) -> Delimiter:
        return self._delimiter

    @property
    def exhausted(self) -> bool:
        return self._remainder is None

    @property
    def remainder(self) -> str | None:
        """Unconsumed text, or None once exhausted."""
        if self._remainder is None:
            return None
        return self._haystack[self._remainder :]

    def __iter__(self) -> StrSplit:
        return self

    def __next__(self) -> str:
        span = self._next_span()
        if span is None:
            raise StopIteration
        return self._haystack[span.start : span.end]

    def iter_spans(self) -> Iterator[Span]:
        """
        Does: Drain the remaining tokens as absolute offsets into the source.
        Returns: Span(start, end) per token; shares state with next().
        """
        while True:
            span = self._next_span()
            if span is None:
                return
            yield span

    def _next_span(self) -> Span | None:
        haystack = self._haystack
        stop = len(haystack)

        while self._remainder is not None:
            start = self._remainder

            if start == stop:
                self._exhaust()
                return None

            found = self._delimiter.find_next(haystack, start, stop)
            if found is None:
                # no more delimiters: the rest is the final token
                self._exhaust()
                return Span(start, stop)

            delim_start, delim_end = found
            if not 0 <= delim_start <= delim_end <= stop - start or delim_end == 0:
                raise MatchBoundsError(
                    f"{self._delimiter!r} returned {found!r} for a window of "
                    f"length {stop - start}"
                )
            self._remainder = start + delim_end

            # consecutive or leading delimiters: skip the empty token
            if delim_start == 0:
                continue
            return Span(start, start + delim_start)

        return None

    def _exhaust(self) -> None:
        self._remainder = None
        debug(f"exhausted {len(self._haystack)} chars on {self._delimiter!r}", topic="split")

    def __repr__(self) -> str:
        return f"StrSplit(remainder={self.remainder!r}, delimiter={self._delimiter!r})"


def until_char(s: str, c: str) -> str:
    """
    Does: Return the first token of `s` split on codepoint `c`.
    Raises: SplitInvariantError when nothing is produced (empty input, or
            input made only of `c`).
    Used by: Callers wanting "text before the first delimiter".

    >>> until_char("hello world", "o")
    'hell'
    """
    token = next(StrSplit(s, CharDelimiter(c)), None)
    if token is None:
        log.error("until_char produced no token for %r on %r", s, c)
        raise SplitInvariantError(f"splitting {s!r} on {c!r} produced no token")
    return token

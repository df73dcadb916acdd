# strsplit/types.py
from __future__ import annotations

from typing import NamedTuple, Protocol, runtime_checkable

"""
types.py.

Does: Define the delimiter capability Protocol and the small value types
shared by the splitter and its matchers.
"""

# (start, end) of a delimiter, relative to the searched window.
Match = tuple[int, int]


class Span(NamedTuple):
    """Absolute [start, end) offsets of a token inside its source text."""

    start: int
    end: int


@runtime_checkable
class Delimiter(Protocol):
    """
    Structural contract for anything StrSplit can split on.

    find_next(text, start, end) searches only the window text[start:end] and
    returns the leftmost delimiter as (start, end) offsets relative to that
    window, or None when the window holds no delimiter. An empty window
    always yields None. Implementations must be pure.
    """

    def find_next(self, text: str, start: int = 0, end: int | None = None) -> Match | None: ...


__all__ = ["Delimiter", "Match", "Span"]

__docformat__ = "google"

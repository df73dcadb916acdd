# strsplit/profiles.py

"""
profiles.py.

Does: Load named delimiter profiles from <data>/delimiters.json and build
      splitters from them.
Returns: dict[name, Delimiter], a single Delimiter, or a ready StrSplit.
Used by: The demo CLI (--profile) and callers keeping delimiters in config.

File format::

    {"csv": {"kind": "char", "value": ","},
     "words": {"kind": "literal", "value": ""}}
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .delimiter import CharDelimiter, LiteralDelimiter
from .splitter import StrSplit
from .types import Delimiter
from .utils.load_config import ConfigParseError, ConfigTypeError, load_config

__all__ = [
    "PROFILES_FILE",
    "UnknownProfileError",
    "load_profiles",
    "get_profile",
    "split_with_profile",
]

log = logging.getLogger(__name__)

PROFILES_FILE = "delimiters"
_KINDS = {"literal": LiteralDelimiter, "char": CharDelimiter}


class UnknownProfileError(KeyError):
    """Raise when a profile name is not defined in the profiles file."""


def _validate_profiles(data: dict[str, Any]) -> dict[str, Any]:
    """Check every entry is {"kind": "literal"|"char", "value": str}."""
    for name, entry in data.items():
        if not isinstance(entry, dict):
            raise ValueError(f"profile {name!r}: expected object, got {type(entry).__name__}")
        kind = entry.get("kind")
        if kind not in _KINDS:
            raise ValueError(f"profile {name!r}: unknown kind {kind!r} (use {sorted(_KINDS)})")
        if not isinstance(entry.get("value"), str):
            raise ValueError(f"profile {name!r}: 'value' must be a string")
        if kind == "char" and len(entry["value"]) != 1:
            raise ValueError(f"profile {name!r}: char value must be exactly one codepoint")
    return data


def load_profiles(
    *, base_dir: Path | None = None, allow_comments: bool = False
) -> dict[str, Delimiter]:
    """
    Does: Read and validate the profiles file, then build one delimiter per entry.
    Returns: Mapping of profile name to Delimiter.
    Raises: ConfigFileNotFound, ConfigParseError (bad entries), ConfigTypeError.
    """
    raw = load_config(PROFILES_FILE, mode="raw", base_dir=base_dir, allow_comments=allow_comments)
    if not isinstance(raw, dict):
        raise ConfigTypeError(
            f"{PROFILES_FILE}.json: expected object at top level, got {type(raw).__name__}"
        )
    try:
        _validate_profiles(raw)
    except (TypeError, ValueError) as e:
        raise ConfigParseError(f"{PROFILES_FILE}.json: {e}") from e

    profiles = {name: _KINDS[entry["kind"]](entry["value"]) for name, entry in raw.items()}
    log.debug("Loaded %d delimiter profiles: %s", len(profiles), ", ".join(sorted(profiles)))
    return profiles


def get_profile(
    name: str, *, base_dir: Path | None = None, allow_comments: bool = False
) -> Delimiter:
    profiles = load_profiles(base_dir=base_dir, allow_comments=allow_comments)
    try:
        return profiles[name]
    except KeyError as e:
        raise UnknownProfileError(
            f"unknown delimiter profile {name!r}; known: {', '.join(sorted(profiles))}"
        ) from e


def split_with_profile(
    text: str, name: str, *, base_dir: Path | None = None, allow_comments: bool = False
) -> StrSplit:
    """Does: Build a StrSplit over `text` using the named profile's delimiter."""
    return StrSplit(text, get_profile(name, base_dir=base_dir, allow_comments=allow_comments))

"""
log.py.

Does: Lightweight debug logger gated by STRSPLIT_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level to stderr; silent when unset.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["ENV_VAR", "debug", "reload_topics", "topic_enabled"]

ENV_VAR = "STRSPLIT_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable STRSPLIT_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def topic_enabled(topic: str) -> bool:
    key = topic.lower().strip()
    return "all" in _DEBUG_TOPICS or key in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "split",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if the topic is enabled via STRSPLIT_DEBUG_TOPICS.
    """
    if not topic_enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)

"""Rule-based intent classifier.

Rules are evaluated in order, first match wins, keywords are matched
case-insensitively on the trimmed input:

1. ``priority`` / ``priorities``           -> Command("priority")
2. ``status`` or contains ``project status`` -> Command("status")
3. ``health`` / ``system health``          -> Command("health")
4. contains ``thread:`` followed by a token -> ThreadLookup(token)
5. anything else                            -> SemanticSearch(trimmed text)
"""

from __future__ import annotations

import re

from brain_chat.domain.exceptions import ClassificationError
from brain_chat.domain.intents import (
    DEFAULT_SEARCH_LIMIT,
    Command,
    Intent,
    SemanticSearch,
    ThreadLookup,
)

PRIORITY_WORDS = frozenset({"priority", "priorities"})
HEALTH_WORDS = frozenset({"health", "system health"})

THREAD_MARKER = "thread:"
# 允许 "thread:" 与编号之间有空白；编号保留原始大小写
THREAD_PATTERN = re.compile(r"thread:\s*(\S+)", re.IGNORECASE)


def classify(text: str) -> Intent:
    """Map raw user input to exactly one Intent."""

    if not isinstance(text, str):
        raise ClassificationError(
            code="INVALID_INPUT",
            message=f"expected str, got {type(text).__name__}",
        )
    original = text.strip()
    query = original.lower()

    if query in PRIORITY_WORDS:
        return Command("priority")

    if query == "status" or "project status" in query:
        return Command("status")

    if query in HEALTH_WORDS:
        return Command("health")

    if THREAD_MARKER in query:
        match = THREAD_PATTERN.search(original)
        if match:
            return ThreadLookup(match.group(1))

    return SemanticSearch(text=original, limit=DEFAULT_SEARCH_LIMIT)

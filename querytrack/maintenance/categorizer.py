"""Pattern rules that assign a category to a query summary.

Used to clean up logs whose entries were filed under catch-all categories
("general", "other"). Pure functions; nothing here touches the log file.
"""

import re
from collections.abc import Callable, Sequence

from querytrack.core.models import QueryRecord

OTHER = "other"

_SELECTION_RE = re.compile(r"^(y|n|yes|no|\d+|option\s*\d+)$", re.IGNORECASE)
_NAVIGATION_RE = re.compile(r"^(view|show|open|display|cat|ls|cd|pwd)", re.IGNORECASE)

_CLARIFICATION_MARKERS = ("will it", "can it", "does it", "how", "why", "what", "?")
_CONVERSATION_MARKERS = ("good", "thanks", "hello", "hi ")

# Second pass for entries already filed as "other": (category, exact matches, substrings)
_OTHER_RULES = [
    ("navigation", {"/init", "exitr", "dir"}, ()),
    ("debugging", {"fix problems"}, ("still getting", "expected expression")),
    ("refactoring", {"remove it"}, ("redo in", "shorten step names")),
    ("clarification", set(), ("tell me which version", "can we break", "should i keep")),
]


def categorize_query(summary: str) -> str:
    """Classify a summary into selection, navigation, clarification, conversation or other."""
    query = summary.lower().strip()

    if _SELECTION_RE.match(query):
        return "selection"
    if _NAVIGATION_RE.match(query):
        return "navigation"
    if any(marker in query for marker in _CLARIFICATION_MARKERS):
        return "clarification"
    if any(marker in query for marker in _CONVERSATION_MARKERS) or query.startswith("hi"):
        return "conversation"
    return OTHER


def recategorize_other(summary: str) -> str:
    """Try to move an "other" entry into a specific category."""
    query = summary.lower().strip()
    for category, exact, substrings in _OTHER_RULES:
        if query in exact or any(s in query for s in substrings):
            return category
    return OTHER


CLASSIFIERS: dict[str, Callable[[str], str]] = {
    "general": categorize_query,
    OTHER: recategorize_other,
}


def remap_categories(
    records: Sequence[QueryRecord],
    source: str,
    classifier: Callable[[str], str] | None = None,
) -> tuple[list[QueryRecord], int]:
    """Reclassify records filed under `source` (case-insensitive).

    Returns new records in the original order plus the number that changed.
    """
    classifier = classifier or CLASSIFIERS.get(source.lower(), categorize_query)
    remapped: list[QueryRecord] = []
    changed = 0

    for record in records:
        if record.category.lower() == source.lower():
            category = classifier(record.query_summary)
            if category != record.category:
                record = record.model_copy(update={"category": category})
                changed += 1
        remapped.append(record)

    return remapped, changed

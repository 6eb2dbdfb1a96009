"""
In-memory catalog search
Flow: entries -> text filter (name/tags) -> category filter -> tag filter -> result
"""

from collections import Counter
from typing import Dict, Iterable, List, Optional

from .registry import ComponentEntry

ALL_CATEGORIES = "all"


def _normalize(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def matches_query(entry: ComponentEntry, query: str) -> bool:
    """True when query is a case-insensitive substring of the name or of any tag."""
    needle = _normalize(query)
    if not needle:
        return True
    if needle in entry.name.lower():
        return True
    return any(needle in tag.lower() for tag in entry.tags)


def filter_components(
    entries: Iterable[ComponentEntry],
    search: Optional[str] = None,
    category: Optional[str] = None,
    tag: Optional[str] = None,
) -> List[ComponentEntry]:
    """
    Filter catalog entries, preserving input order.

    Args:
        entries: Catalog entries to filter
        search: Substring matched against name and tags; blank disables
        category: Exact category (case-insensitive); blank or "all" disables
        tag: Exact tag (case-insensitive); blank disables

    Returns:
        Entries that satisfy every active filter
    """
    wanted_category = _normalize(category)
    if wanted_category == ALL_CATEGORIES:
        wanted_category = ""
    wanted_tag = _normalize(tag)

    result = []
    for entry in entries:
        if not matches_query(entry, search or ""):
            continue
        if wanted_category and entry.category.lower() != wanted_category:
            continue
        if wanted_tag and wanted_tag not in (t.lower() for t in entry.tags):
            continue
        result.append(entry)
    return result


def category_counts(entries: Iterable[ComponentEntry]) -> Dict[str, int]:
    """Number of entries per category, ordered by category name."""
    counts = Counter(entry.category for entry in entries)
    return {category: counts[category] for category in sorted(counts)}


def tag_counts(entries: Iterable[ComponentEntry]) -> Dict[str, int]:
    """Number of entries per tag, most used first, ties by tag name."""
    counts = Counter(tag for entry in entries for tag in entry.tags)
    return dict(sorted(counts.items(), key=lambda item: (-item[1], item[0])))

"""
Static component catalog
"""

from .registry import COMPONENT_REGISTRY, ComponentEntry
from .search import category_counts, filter_components, matches_query, tag_counts

__all__ = [
    "COMPONENT_REGISTRY",
    "ComponentEntry",
    "filter_components",
    "matches_query",
    "category_counts",
    "tag_counts",
]

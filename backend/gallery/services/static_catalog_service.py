"""
Static Catalog Service
Serves the component registry from memory; no persistence, no writes.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from gallery.catalog.registry import COMPONENT_REGISTRY, ComponentEntry
from gallery.catalog.search import category_counts, filter_components, tag_counts
from gallery.core.exceptions import CatalogReadOnlyError, NotFoundError
from gallery.schemas.component import (
    ComponentListItem,
    ComponentResponse,
    CopyResponse,
)


class StaticCatalogService:
    """Read-only catalog over an in-memory list of registry entries"""

    read_only = True

    def __init__(self, entries: Sequence[ComponentEntry] = COMPONENT_REGISTRY):
        self.entries = list(entries)

    async def list_components(
        self,
        page: int = 1,
        page_size: int = 20,
        search: Optional[str] = None,
        category: Optional[str] = None,
        tag: Optional[str] = None,
        sort: str = "newest"
    ) -> Tuple[List[ComponentListItem], int]:
        matched = filter_components(self.entries, search=search, category=category, tag=tag)
        # Registry entries carry no timestamps or counters; only name order differs
        if sort == "name":
            matched = sorted(matched, key=lambda entry: entry.name.lower())

        start = (page - 1) * page_size
        items = [ComponentListItem.model_validate(entry) for entry in matched[start:start + page_size]]
        return items, len(matched)

    async def get_component(self, component_id: str) -> ComponentResponse:
        return ComponentResponse.model_validate(self._require_entry(component_id))

    async def record_view(self, component_id: str) -> ComponentResponse:
        return await self.get_component(component_id)

    async def record_copy(self, component_id: str) -> CopyResponse:
        entry = self._require_entry(component_id)
        return CopyResponse(id=entry.id, code=entry.code, copies=0)

    async def get_categories(self) -> Dict[str, int]:
        return category_counts(self.entries)

    async def get_tags(self) -> Dict[str, int]:
        return tag_counts(self.entries)

    async def create_component(self, *args, **kwargs):
        raise CatalogReadOnlyError(operation="create_component")

    async def update_component(self, *args, **kwargs):
        raise CatalogReadOnlyError(operation="update_component")

    async def delete_component(self, *args, **kwargs):
        raise CatalogReadOnlyError(operation="delete_component")

    def _require_entry(self, component_id: str) -> ComponentEntry:
        for entry in self.entries:
            if entry.id == component_id:
                return entry
        raise NotFoundError(
            f"Component not found: {component_id}",
            resource_type="component",
            resource_id=component_id
        )

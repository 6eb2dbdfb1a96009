"""
Component Service
Catalog business logic over the relational database
"""

from collections import Counter
from typing import Dict, List, Optional, Tuple

from sqlalchemy import Text, and_, column, func, literal, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.catalog.search import ALL_CATEGORIES
from gallery.core.exceptions import ConflictError, NotFoundError, ValidationError
from gallery.core.logging import get_logger
from gallery.models.component import Component
from gallery.schemas.component import (
    ComponentListItem,
    ComponentResponse,
    CopyResponse,
    CreateComponentRequest,
    UpdateComponentRequest,
)

logger = get_logger(__name__)

SORT_COLUMNS = {
    "newest": (Component.created_at.desc(), Component.id),
    "popular": (Component.views.desc(), Component.name),
    "copies": (Component.copies.desc(), Component.name),
    "name": (Component.name.asc(), Component.id),
}


class ComponentService:
    """Component catalog service"""

    read_only = False

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_components(
        self,
        page: int = 1,
        page_size: int = 20,
        search: Optional[str] = None,
        category: Optional[str] = None,
        tag: Optional[str] = None,
        sort: str = "newest"
    ) -> Tuple[List[ComponentListItem], int]:
        """List components matching the filters, one page at a time."""
        query = select(Component)
        count_query = select(func.count(Component.id))

        conditions = self._filter_conditions(search, category, tag)
        if conditions:
            condition = and_(*conditions)
            query = query.where(condition)
            count_query = count_query.where(condition)

        query = query.order_by(*SORT_COLUMNS.get(sort, SORT_COLUMNS["newest"]))
        query = query.offset((page - 1) * page_size).limit(page_size)

        result = await self.db.execute(query)
        components = result.scalars().all()

        count_result = await self.db.execute(count_query)
        total = count_result.scalar() or 0

        items = [ComponentListItem.model_validate(component) for component in components]
        logger.info("Listed components", returned=len(items), total=total, search=search, category=category, tag=tag)
        return items, total

    async def get_component(self, component_id: str) -> ComponentResponse:
        component = await self._require_component(component_id)
        return ComponentResponse.model_validate(component)

    async def create_component(self, data: CreateComponentRequest) -> ComponentResponse:
        """Insert a new component; the id must be unused."""
        try:
            if data.id and await self._get_component_by_id(data.id):
                raise ConflictError(
                    f"Component already exists: {data.id}",
                    conflicting_resource=data.id
                )

            component = Component(**data.model_dump(exclude_none=True))
            self.db.add(component)
            await self.db.commit()
            await self.db.refresh(component)

            logger.info("Component created", component_id=component.id, name=component.name)
            return ComponentResponse.model_validate(component)

        except IntegrityError as e:
            await self.db.rollback()
            raise ConflictError(f"Component already exists: {data.id}", conflicting_resource=data.id) from e
        except Exception:
            await self.db.rollback()
            raise

    async def update_component(
        self,
        component_id: str,
        data: UpdateComponentRequest
    ) -> ComponentResponse:
        changes = {field: value for field, value in data.model_dump(exclude_unset=True).items() if value is not None}
        if not changes:
            raise ValidationError("No fields to update", field="body")

        try:
            component = await self._require_component(component_id)

            for field, value in changes.items():
                setattr(component, field, value)

            await self.db.commit()
            await self.db.refresh(component)

            logger.info("Component updated", component_id=component.id)
            return ComponentResponse.model_validate(component)

        except Exception:
            await self.db.rollback()
            raise

    async def delete_component(self, component_id: str) -> bool:
        """Delete a component; favorites and versions go with it."""
        try:
            component = await self._require_component(component_id)
            await self.db.delete(component)
            await self.db.commit()

            logger.info("Component deleted", component_id=component_id)
            return True

        except Exception:
            await self.db.rollback()
            raise

    async def record_view(self, component_id: str) -> ComponentResponse:
        component = await self._increment(component_id, "views")
        return ComponentResponse.model_validate(component)

    async def record_copy(self, component_id: str) -> CopyResponse:
        component = await self._increment(component_id, "copies")
        return CopyResponse(id=component.id, code=component.code, copies=component.copies)

    async def get_categories(self) -> Dict[str, int]:
        """Number of components per category, ordered by category name."""
        result = await self.db.execute(
            select(Component.category, func.count(Component.id))
            .group_by(Component.category)
            .order_by(Component.category)
        )
        return {category: count for category, count in result.all()}

    async def get_tags(self) -> Dict[str, int]:
        """Number of components per tag, most used first."""
        result = await self.db.execute(select(Component.tags))
        counts = Counter(tag for tags in result.scalars().all() for tag in (tags or []))
        return dict(sorted(counts.items(), key=lambda item: (-item[1], item[0])))

    async def _increment(self, component_id: str, counter: str) -> Component:
        try:
            component = await self._require_component(component_id)
            counter_column = getattr(Component, counter)
            await self.db.execute(
                update(Component)
                .where(Component.id == component_id)
                .values({counter: counter_column + 1})
            )
            await self.db.commit()
            await self.db.refresh(component)

            logger.debug("Counter incremented", component_id=component_id, counter=counter,
                         value=getattr(component, counter))
            return component

        except Exception:
            await self.db.rollback()
            raise

    def _filter_conditions(
        self,
        search: Optional[str],
        category: Optional[str],
        tag: Optional[str]
    ) -> list:
        conditions = []

        if search and search.strip():
            needle = search.strip()
            conditions.append(
                Component.name.icontains(needle, autoescape=True)
                | self._any_tag(lambda value: value.icontains(needle, autoescape=True))
            )

        if category and category.strip() and category.strip().lower() != ALL_CATEGORIES:
            conditions.append(func.lower(Component.category) == category.strip().lower())

        if tag and tag.strip():
            wanted = tag.strip().lower()
            conditions.append(self._any_tag(lambda value: func.lower(value) == wanted))

        return conditions

    def _any_tag(self, predicate):
        """
        EXISTS over the elements of the row's tags column.

        Each element is tested on its own, so array or JSON punctuation is
        never matched. A NULL tags column has no elements.
        """
        value = column("value", Text)
        if self.db.get_bind().dialect.name == "postgresql":
            elements = func.unnest(Component.tags).table_valued(value).render_derived(name="tag_values")
        else:
            elements = func.json_each(Component.tags).table_valued(value).alias("tag_values")

        return select(literal(1)).select_from(elements).where(predicate(elements.c.value)).exists()

    async def _require_component(self, component_id: str) -> Component:
        component = await self._get_component_by_id(component_id)
        if not component:
            raise NotFoundError(
                f"Component not found: {component_id}",
                resource_type="component",
                resource_id=component_id
            )
        return component

    async def _get_component_by_id(self, component_id: str) -> Optional[Component]:
        result = await self.db.execute(select(Component).where(Component.id == component_id))
        return result.scalar_one_or_none()

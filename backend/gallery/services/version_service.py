"""
Component Version Service
Handles code snapshots for components
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.core.exceptions import ConflictError, NotFoundError
from gallery.core.logging import get_logger
from gallery.models.component import Component, ComponentVersion
from gallery.schemas.component import CreateVersionRequest, VersionResponse

logger = get_logger(__name__)


class ComponentVersionService:
    """Service for managing component versions"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_versions(self, component_id: str) -> List[VersionResponse]:
        """Versions of a component, newest first."""
        await self._require_component(component_id)

        result = await self.db.execute(
            select(ComponentVersion)
            .where(ComponentVersion.component_id == component_id)
            .order_by(ComponentVersion.created_at.desc())
        )
        return [VersionResponse.model_validate(version) for version in result.scalars().all()]

    async def create_version(
        self,
        component_id: str,
        data: CreateVersionRequest
    ) -> VersionResponse:
        """
        Snapshot a component's code under a version label.

        The snapshot takes the request's code, or the component's current code
        when none is given. With apply set, the component's code is replaced
        by the snapshot in the same commit.
        """
        try:
            component = await self._require_component(component_id)

            existing = await self.db.execute(
                select(ComponentVersion.id).where(
                    ComponentVersion.component_id == component_id,
                    ComponentVersion.version == data.version
                )
            )
            if existing.scalar_one_or_none():
                raise ConflictError(
                    f"Version {data.version} already exists for component {component_id}",
                    conflicting_resource=data.version
                )

            version = ComponentVersion(
                component_id=component_id,
                version=data.version,
                code=data.code or component.code,
                changelog=data.changelog
            )
            self.db.add(version)

            if data.apply:
                component.code = version.code

            await self.db.commit()
            await self.db.refresh(version)

            logger.info("Component version created", component_id=component_id,
                        version=data.version, applied=data.apply)
            return VersionResponse.model_validate(version)

        except Exception:
            await self.db.rollback()
            raise

    async def _require_component(self, component_id: str) -> Component:
        result = await self.db.execute(select(Component).where(Component.id == component_id))
        component = result.scalar_one_or_none()
        if not component:
            raise NotFoundError(
                f"Component not found: {component_id}",
                resource_type="component",
                resource_id=component_id
            )
        return component

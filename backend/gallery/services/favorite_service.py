"""
Favorite Service
Per-user component bookmarks
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from gallery.core.exceptions import ConflictError, NotFoundError
from gallery.core.logging import get_logger
from gallery.models.component import Component
from gallery.models.favorite import Favorite
from gallery.schemas.favorite import FavoriteResponse

logger = get_logger(__name__)


class FavoriteService:
    """Favorite management service"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_favorites(self, user_id: str) -> List[FavoriteResponse]:
        """A user's favorites with their components, newest first."""
        result = await self.db.execute(
            select(Favorite)
            .options(selectinload(Favorite.component))
            .where(Favorite.user_id == user_id)
            .order_by(Favorite.created_at.desc())
        )
        return [FavoriteResponse.model_validate(favorite) for favorite in result.scalars().all()]

    async def add_favorite(self, user_id: str, component_id: str) -> FavoriteResponse:
        try:
            component = await self.db.get(Component, component_id)
            if not component:
                raise NotFoundError(
                    f"Component not found: {component_id}",
                    resource_type="component",
                    resource_id=component_id
                )

            if await self._get_favorite(user_id, component_id):
                raise ConflictError(
                    f"Component {component_id} is already a favorite",
                    conflicting_resource=component_id
                )

            self.db.add(Favorite(user_id=user_id, component_id=component_id))
            await self.db.commit()

        except IntegrityError as e:
            # Lost a race against a concurrent insert of the same pair
            await self.db.rollback()
            raise ConflictError(
                f"Component {component_id} is already a favorite",
                conflicting_resource=component_id
            ) from e
        except Exception:
            await self.db.rollback()
            raise

        favorite = await self._get_favorite(user_id, component_id)
        logger.info("Favorite added", user_id=user_id, component_id=component_id)
        return FavoriteResponse.model_validate(favorite)

    async def remove_favorite(self, user_id: str, component_id: str) -> bool:
        try:
            favorite = await self._get_favorite(user_id, component_id)
            if not favorite:
                raise NotFoundError(
                    f"Favorite not found: {component_id}",
                    resource_type="favorite",
                    resource_id=component_id
                )

            await self.db.delete(favorite)
            await self.db.commit()

            logger.info("Favorite removed", user_id=user_id, component_id=component_id)
            return True

        except Exception:
            await self.db.rollback()
            raise

    async def _get_favorite(self, user_id: str, component_id: str) -> Optional[Favorite]:
        result = await self.db.execute(
            select(Favorite)
            .options(selectinload(Favorite.component))
            .where(Favorite.user_id == user_id, Favorite.component_id == component_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

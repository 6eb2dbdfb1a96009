"""
Favorite endpoints
Flow: X-User-Id header -> FavoriteService -> Favorite table
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.core.auth import get_current_user_id, require_database_catalog
from gallery.core.database import get_db
from gallery.core.exceptions import GalleryException
from gallery.core.logging import get_logger
from gallery.schemas.favorite import AddFavoriteRequest, FavoriteResponse
from gallery.services.favorite_service import FavoriteService

logger = get_logger(__name__)

router = APIRouter(dependencies=[Depends(require_database_catalog)])


@router.get("/", response_model=List[FavoriteResponse])
async def list_favorites(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """The caller's favorites"""
    try:
        return await FavoriteService(db).list_favorites(user_id)
    except Exception as e:
        logger.error("Failed to list favorites", user_id=user_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while listing favorites"
        )


@router.post("/", response_model=FavoriteResponse, status_code=status.HTTP_201_CREATED)
async def add_favorite(
    data: AddFavoriteRequest,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Bookmark a component"""
    try:
        return await FavoriteService(db).add_favorite(user_id, data.component_id)
    except GalleryException as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error("Failed to add favorite", user_id=user_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while adding the favorite"
        )


@router.delete("/{component_id}")
async def remove_favorite(
    component_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Remove a bookmark"""
    try:
        await FavoriteService(db).remove_favorite(user_id, component_id)
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content={"message": "Favorite removed", "component_id": component_id}
        )
    except GalleryException as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error("Failed to remove favorite", user_id=user_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while removing the favorite"
        )

"""
User endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.core.auth import get_current_user, require_database_catalog
from gallery.core.database import get_db
from gallery.core.exceptions import GalleryException
from gallery.models.user import User
from gallery.schemas.user import CreateUserRequest, UserResponse
from gallery.services.user_service import UserService

router = APIRouter(dependencies=[Depends(require_database_catalog)])


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(data: CreateUserRequest, db: AsyncSession = Depends(get_db)):
    try:
        return await UserService(db).create_user(data)
    except GalleryException as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: User = Depends(get_current_user)):
    return UserResponse.model_validate(current_user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, db: AsyncSession = Depends(get_db)):
    try:
        return await UserService(db).get_user(user_id)
    except GalleryException as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

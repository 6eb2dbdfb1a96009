"""
User Service
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.core.exceptions import ConflictError, NotFoundError
from gallery.core.logging import get_logger
from gallery.models.user import User
from gallery.schemas.user import CreateUserRequest, UserResponse

logger = get_logger(__name__)


class UserService:
    """User account service"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_user(self, data: CreateUserRequest) -> UserResponse:
        try:
            if await self.get_user_by_email(data.email):
                raise ConflictError(f"Email already registered: {data.email}", conflicting_resource=data.email)

            user = User(email=data.email, name=data.name, role=data.role)
            self.db.add(user)
            await self.db.commit()
            await self.db.refresh(user)

            logger.info("User created", user_id=user.id, role=user.role)
            return UserResponse.model_validate(user)

        except IntegrityError as e:
            await self.db.rollback()
            raise ConflictError(f"Email already registered: {data.email}", conflicting_resource=data.email) from e
        except Exception:
            await self.db.rollback()
            raise

    async def get_user(self, user_id: str) -> UserResponse:
        user = await self.get_user_by_id(user_id)
        if not user:
            raise NotFoundError(f"User not found: {user_id}", resource_type="user", resource_id=user_id)
        return UserResponse.model_validate(user)

    async def get_user_by_id(self, user_id: str) -> Optional[User]:
        return await self.db.get(User, user_id)

    async def get_user_by_email(self, email: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.email == email.lower()))
        return result.scalar_one_or_none()

"""
Caller identification for the gallery API
Flow: HTTP request → User header → (optional) DB lookup → role check

The gallery has no login flow of its own: the frontend forwards the id of
the signed-in user in a request header (X-User-Id by default). Failures
raise AuthenticationError / AuthorizationError, which the app-level
exception handler renders as 401 / 403.
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.config.settings import get_settings
from gallery.core.database import get_db
from gallery.core.exceptions import AuthenticationError, AuthorizationError, CatalogReadOnlyError
from gallery.core.logging import get_logger
from gallery.models.user import User, UserRole

logger = get_logger(__name__)


async def get_current_user_id(request: Request) -> str:
    """
    Read the caller's user id from the request header.

    Raises:
        AuthenticationError: if the header is missing or blank
    """
    header = get_settings().USER_HEADER
    user_id = (request.headers.get(header) or "").strip()
    if not user_id:
        logger.warning("Missing user header", header=header, path=request.url.path)
        raise AuthenticationError()
    return user_id


async def get_current_user(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
) -> User:
    """
    Resolve the caller to a stored user.

    Raises:
        AuthenticationError: if no user has that id
    """
    user = await db.get(User, user_id)
    if not user:
        logger.warning("Unknown user id", user_id=user_id)
        raise AuthenticationError("Unknown user", error_code="UNKNOWN_USER")
    return user


def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    """
    Get current user, requiring the admin role.

    Raises:
        AuthorizationError: if the user is not an admin
    """
    if not current_user.is_admin:
        logger.warning("Non-admin attempted catalog write", user_id=current_user.id)
        raise AuthorizationError("Admin role required", required_role=UserRole.ADMIN.value)
    return current_user


def require_database_catalog() -> None:
    """Reject operations that need persistence when serving the static registry."""
    if get_settings().CATALOG_SOURCE != "database":
        raise CatalogReadOnlyError("This operation requires the database catalog")

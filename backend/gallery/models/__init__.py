"""
Database models package
"""

from gallery.core.database import Base
from .component import Component, ComponentVersion
from .favorite import Favorite
from .user import User, UserRole

__all__ = [
    "Base",
    "Component",
    "ComponentVersion",
    "Favorite",
    "User",
    "UserRole",
]

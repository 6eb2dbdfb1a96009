"""
Favorite model
Flow: User id (from request header) -> Favorite -> Component
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gallery.core.database import Base
from .types import new_id, utcnow

if TYPE_CHECKING:
    from .component import Component


class Favorite(Base):
    """Favorite model - a user's bookmark of a component, unique per pair."""

    __tablename__ = "Favorite"
    __table_args__ = (
        Index("Favorite_userId_idx", "userId"),
        Index("Favorite_userId_componentId_key", "userId", "componentId", unique=True),
    )

    id: Mapped[str] = mapped_column(String, primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column("userId", Text, nullable=False)
    component_id: Mapped[str] = mapped_column(
        "componentId",
        String,
        ForeignKey("Component.id", ondelete="CASCADE", onupdate="CASCADE", name="Favorite_componentId_fkey"),
        nullable=False
    )

    created_at: Mapped[datetime] = mapped_column(
        "createdAt",
        DateTime,
        nullable=False,
        default=utcnow,
        server_default=func.now()
    )

    component: Mapped["Component"] = relationship("Component", back_populates="favorites")

    def __repr__(self) -> str:
        return f"<Favorite(user_id={self.user_id}, component_id={self.component_id})>"

"""
Component and ComponentVersion models
Flow: Component -> Versions (code history) / Favorites (per user)

Table and column names follow the published schema exactly (quoted
camelCase); Python attributes are snake_case.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String, Text, func, true
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gallery.core.database import Base
from .types import StringArray, new_id, utcnow

if TYPE_CHECKING:
    from .favorite import Favorite


class Component(Base):
    """Component model - one UI snippet shown in the gallery."""

    __tablename__ = "Component"
    __table_args__ = (
        Index("Component_category_idx", "category"),
        Index("Component_tags_idx", "tags"),
    )

    id: Mapped[str] = mapped_column(String, primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(Text, nullable=False)
    tags: Mapped[list[str] | None] = mapped_column(StringArray, default=list)

    # Source
    file_path: Mapped[str] = mapped_column("filePath", Text, nullable=False)
    component_path: Mapped[str] = mapped_column("componentPath", Text, nullable=False)
    code: Mapped[str] = mapped_column(Text, nullable=False)
    dependencies: Mapped[list[str] | None] = mapped_column(StringArray, default=list)

    # Capabilities
    responsive: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default=true())
    dark_mode: Mapped[bool] = mapped_column("darkMode", Boolean, nullable=False, default=True, server_default=true())

    # Usage counters
    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    copies: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        "createdAt",
        DateTime,
        nullable=False,
        default=utcnow,
        server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        "updatedAt",
        DateTime,
        nullable=False,
        server_default=func.now(),
        onupdate=func.now()
    )

    # Relationships (rows are removed by ON DELETE CASCADE in the database)
    favorites: Mapped[list["Favorite"]] = relationship(
        "Favorite",
        back_populates="component",
        cascade="all, delete-orphan",
        passive_deletes=True
    )
    versions: Mapped[list["ComponentVersion"]] = relationship(
        "ComponentVersion",
        back_populates="component",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ComponentVersion.created_at.desc()"
    )

    def __repr__(self) -> str:
        return f"<Component(id={self.id}, name={self.name}, category={self.category})>"


class ComponentVersion(Base):
    """ComponentVersion model - a code snapshot of a component."""

    __tablename__ = "ComponentVersion"
    __table_args__ = (
        Index("ComponentVersion_componentId_idx", "componentId"),
    )

    id: Mapped[str] = mapped_column(String, primary_key=True, default=new_id)
    component_id: Mapped[str] = mapped_column(
        "componentId",
        String,
        ForeignKey("Component.id", ondelete="CASCADE", onupdate="CASCADE", name="ComponentVersion_componentId_fkey"),
        nullable=False
    )
    version: Mapped[str] = mapped_column(Text, nullable=False)
    code: Mapped[str] = mapped_column(Text, nullable=False)
    changelog: Mapped[str | None] = mapped_column(Text)

    created_at: Mapped[datetime] = mapped_column(
        "createdAt",
        DateTime,
        nullable=False,
        default=utcnow,
        server_default=func.now()
    )

    component: Mapped["Component"] = relationship("Component", back_populates="versions")

    def __repr__(self) -> str:
        return f"<ComponentVersion(id={self.id}, component_id={self.component_id}, version={self.version})>"

"""
Component Schemas
Request/response models for the component catalog API
"""

from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

SortOrder = Literal["newest", "popular", "copies", "name"]


def _clean_tags(tags: List[str]) -> List[str]:
    """Trim tags, drop blanks and duplicates (first spelling wins)."""
    seen = set()
    cleaned = []
    for tag in tags:
        tag = tag.strip()
        if tag and tag.lower() not in seen:
            seen.add(tag.lower())
            cleaned.append(tag)
    return cleaned


class ComponentBase(BaseModel):
    """Shared component fields"""
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    description: str = Field(..., description="Short description shown on the card")
    category: str = Field(..., min_length=1, max_length=100, description="Gallery category")
    tags: List[str] = Field(default_factory=list, description="Search tags")
    file_path: str = Field(..., min_length=1, description="Source file path")
    component_path: str = Field(..., min_length=1, description="Import path")
    code: str = Field(..., min_length=1, description="Component source code")
    dependencies: List[str] = Field(default_factory=list, description="npm packages required by the code")
    responsive: bool = Field(True)
    dark_mode: bool = Field(True)

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: List[str]) -> List[str]:
        return _clean_tags(v)


class CreateComponentRequest(ComponentBase):
    """Component creation request"""
    id: Optional[str] = Field(None, min_length=1, max_length=255, description="Slug id; generated when omitted")


class UpdateComponentRequest(BaseModel):
    """Partial component update"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    tags: Optional[List[str]] = None
    file_path: Optional[str] = Field(None, min_length=1)
    component_path: Optional[str] = Field(None, min_length=1)
    code: Optional[str] = Field(None, min_length=1)
    dependencies: Optional[List[str]] = None
    responsive: Optional[bool] = None
    dark_mode: Optional[bool] = None

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        if v is None:
            return v
        return _clean_tags(v)


class ComponentResponse(ComponentBase):
    """Full component, including code"""
    id: str
    views: int = 0
    copies: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

    @field_validator("tags", "dependencies", mode="before")
    @classmethod
    def null_as_empty(cls, v: Optional[List[str]]) -> List[str]:
        # Both columns are nullable arrays
        return [] if v is None else v


class ComponentListItem(BaseModel):
    """Card data for the masonry grid (no source code)"""
    id: str
    name: str
    description: str
    category: str
    tags: List[str]
    responsive: bool
    dark_mode: bool
    views: int = 0
    copies: int = 0
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

    @field_validator("tags", mode="before")
    @classmethod
    def null_as_empty(cls, v: Optional[List[str]]) -> List[str]:
        return [] if v is None else v


class ComponentListResponse(BaseModel):
    """Paginated component list"""
    items: List[ComponentListItem]
    total: int
    page: int
    page_size: int
    has_next: bool
    has_prev: bool


class CategoryResponse(BaseModel):
    """Category list with counts"""
    categories: List[str]
    category_counts: Dict[str, int]


class TagResponse(BaseModel):
    """Tag list with counts"""
    tags: List[str]
    tag_counts: Dict[str, int]


class CopyResponse(BaseModel):
    """Result of copying a component's code"""
    id: str
    code: str
    copies: int


class CreateVersionRequest(BaseModel):
    """Request model for creating a version snapshot"""
    version: str = Field(..., min_length=1, max_length=50, description="Version label, e.g. 1.1.0")
    code: Optional[str] = Field(None, min_length=1, description="Snapshot code; defaults to the current code")
    changelog: Optional[str] = Field(None, description="What changed")
    apply: bool = Field(False, description="Replace the component's code with this snapshot")

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("version must not be blank")
        return v.strip()


class VersionResponse(BaseModel):
    """Response model for a component version"""
    id: str
    component_id: str
    version: str
    code: str
    changelog: Optional[str]
    created_at: datetime

    model_config = {"from_attributes": True}

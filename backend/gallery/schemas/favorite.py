"""
Favorite Schemas
"""

from datetime import datetime

from pydantic import BaseModel, Field

from .component import ComponentListItem


class AddFavoriteRequest(BaseModel):
    component_id: str = Field(..., min_length=1, description="Component to bookmark")


class FavoriteResponse(BaseModel):
    id: str
    user_id: str
    component_id: str
    created_at: datetime
    component: ComponentListItem

    model_config = {"from_attributes": True}

"""
User Schemas
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator


class CreateUserRequest(BaseModel):
    """User creation request"""
    email: str = Field(..., min_length=3, max_length=255)
    name: Optional[str] = Field(None, max_length=255)
    role: Literal["user", "admin"] = Field("user")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = v.strip().lower()
        local, _, domain = v.partition("@")
        if not local or "." not in domain:
            raise ValueError("invalid email address")
        return v


class UserResponse(BaseModel):
    id: str
    email: str
    name: Optional[str]
    role: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

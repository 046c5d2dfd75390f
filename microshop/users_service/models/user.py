"""
User data models and seed records
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class UserRole(str, Enum):
    """Roles reported by the statistics endpoint"""
    ADMIN = "admin"
    USER = "user"


class UserCreate(BaseModel):
    """Schema for creating a new user"""
    name: str = Field(..., min_length=1, description="Display name")
    email: str = Field(..., min_length=1, description="Unique email address")
    role: str = Field(default=UserRole.USER.value, min_length=1, description="Free-form role")

    @field_validator("role", mode="before")
    @classmethod
    def default_role(cls, v):
        """Blank roles fall back to the default role"""
        return v or UserRole.USER.value


class UserUpdate(BaseModel):
    """Schema for updating a user; only supplied fields are applied"""
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, min_length=1)
    role: Optional[str] = Field(None, min_length=1)

    @field_validator("name", "email", "role", mode="before")
    @classmethod
    def reject_null(cls, v):
        """Supplied fields must carry a value"""
        if v is None:
            raise ValueError("Field must not be null")
        return v


SEED_USERS = [
    {
        "id": 1,
        "name": "John Doe",
        "email": "john.doe@example.com",
        "role": "admin",
        "createdAt": "2024-01-01T00:00:00.000Z"
    },
    {
        "id": 2,
        "name": "Jane Smith",
        "email": "jane.smith@example.com",
        "role": "user",
        "createdAt": "2024-01-15T00:00:00.000Z"
    },
    {
        "id": 3,
        "name": "Bob Johnson",
        "email": "bob.johnson@example.com",
        "role": "user",
        "createdAt": "2024-02-01T00:00:00.000Z"
    }
]

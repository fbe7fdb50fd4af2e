# dafurn/schemas/user.py
"""
Pydantic schemas for the user resource.
UserCreate validates every record before it reaches storage; UserOut is the
JSON shape returned by the API.
"""
from typing import Optional

from pydantic import BaseModel, Field

__all__ = ["UserCreate", "UserOut", "RatingUpdateIn", "HealthOut"]


class UserCreate(BaseModel):
    """
    Record accepted by the storage layer for inserts.
    """
    username: str  # Display name (required)
    email: str  # Contact email (required, unique in storage)
    avatar: Optional[str] = None  # Avatar image URL
    bio: Optional[str] = None  # Free-form profile text
    rating: float = Field(0, allow_inf_nan=False)  # Marketplace rating, finite


class UserOut(BaseModel):
    """
    Response model for a single user.
    """
    id: str  # User unique identifier (UUID string)
    username: str
    avatar: Optional[str] = None
    bio: Optional[str] = None
    rating: float
    email: str
    createdAt: str  # Creation timestamp (ISO format)
    updatedAt: str  # Last modification timestamp (ISO format)


class RatingUpdateIn(BaseModel):
    """
    Request model for PUT /api/users/{id}.
    Only type coercion is applied: any finite number (or numeric string) is accepted.
    """
    rating: float = Field(allow_inf_nan=False)


class HealthOut(BaseModel):
    status: str

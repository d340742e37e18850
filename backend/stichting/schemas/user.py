"""
Pydantic schemas for User entity.
"""
from pydantic import Field
from typing import Optional
from datetime import datetime
from stichting.models.user import Role
from stichting.schemas.base import CamelModel, RequestModel


class UserSummary(CamelModel):
    """Sanitized user projection returned by login, /me and participant lists."""
    id: int
    username: str
    first_name: str
    tussenvoegsel: Optional[str] = None
    last_name: str
    role: Role
    must_change_password: bool


class UserResponse(UserSummary):
    """Full user record for the admin directory (never the hash)."""
    phone: Optional[str] = None
    special_notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class UserCreate(RequestModel):
    """Schema for user creation by an admin."""
    username: str = Field(..., min_length=1, max_length=50)
    first_name: str = Field("", max_length=100)
    tussenvoegsel: Optional[str] = Field(None, max_length=30)
    last_name: str = Field("", max_length=100)
    phone: Optional[str] = Field(None, max_length=30)
    role: Role = Role.USER
    special_notes: Optional[str] = None


class UserUpdate(RequestModel):
    """Schema for profile update; only supplied fields change."""
    username: Optional[str] = Field(None, min_length=1, max_length=50)
    first_name: Optional[str] = Field(None, max_length=100)
    tussenvoegsel: Optional[str] = Field(None, max_length=30)
    last_name: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=30)
    role: Optional[Role] = None
    special_notes: Optional[str] = None

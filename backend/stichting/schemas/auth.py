"""
Pydantic schemas for authentication.
"""
from typing import Optional
from stichting.schemas.base import CamelModel, RequestModel
from stichting.schemas.user import UserSummary


class LoginRequest(RequestModel):
    username: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(CamelModel):
    """Bearer token plus the logged-in user."""
    token: str
    token_type: str = "bearer"
    user: UserSummary


class ChangePasswordRequest(RequestModel):
    new_password: Optional[str] = None

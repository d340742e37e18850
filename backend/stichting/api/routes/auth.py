"""
Authentication routes for login, current user and password change.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from stichting.api.dependencies import get_current_identity, get_settings
from stichting.core.config import Settings
from stichting.core.security import Identity
from stichting.db.session import get_db
from stichting.schemas.auth import ChangePasswordRequest, LoginRequest, LoginResponse
from stichting.schemas.base import OkResponse
from stichting.schemas.user import UserSummary
from stichting.services import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Login and get JWT token."""
    token, user = auth_service.login(db, credentials.username, credentials.password, settings)
    return {"token": token, "user": user}


@router.get("/me", response_model=UserSummary)
async def me(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Get current user information."""
    return auth_service.get_current_user(db, identity)


@router.post("/change-password", response_model=OkResponse)
async def change_password(
    body: ChangePasswordRequest,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Set a new password for the logged-in user."""
    auth_service.change_password(db, identity, body.new_password)
    return {"ok": True}

"""
User management routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from stichting.api.dependencies import get_current_identity, get_settings, require_admin
from stichting.core.config import Settings
from stichting.core.security import Identity
from stichting.db.session import get_db
from stichting.schemas.base import OkResponse
from stichting.schemas.user import UserCreate, UserResponse, UserUpdate
from stichting.services import user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserResponse])
async def list_users(
    admin: Identity = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """List all users by id."""
    return user_service.list_users(db)


@router.post("", response_model=UserResponse)
async def create_user(
    user_data: UserCreate,
    admin: Identity = Depends(require_admin),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Create a user with the default password."""
    return user_service.create_user(db, user_data, settings.DEFAULT_PASSWORD)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    user_data: UserUpdate,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Update a profile (own profile, or any profile as admin)."""
    return user_service.update_user(db, user_id, user_data, identity)


@router.post("/{user_id}/reset-password", response_model=OkResponse)
async def reset_password(
    user_id: int,
    admin: Identity = Depends(require_admin),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Reset a user's password to the default."""
    user_service.reset_password(db, user_id, settings.DEFAULT_PASSWORD)
    return {"ok": True}

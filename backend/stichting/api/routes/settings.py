"""
Site settings routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from stichting.api.dependencies import require_admin
from stichting.core.security import Identity
from stichting.db.session import get_db
from stichting.schemas.setting import SettingResponse, SettingUpdate
from stichting.services import setting_service

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=SettingResponse)
async def get_settings(db: Session = Depends(get_db)):
    return setting_service.get_settings(db)


@router.put("", response_model=SettingResponse)
async def update_settings(
    setting_data: SettingUpdate,
    admin: Identity = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Overwrite site settings (admin only)."""
    return setting_service.update_settings(db, setting_data)

"""
Site settings service. The settings table holds exactly one row, id 1.
"""
import logging
from sqlalchemy.orm import Session
from stichting.models.setting import Setting, SETTING_ID
from stichting.schemas.setting import SettingUpdate

logger = logging.getLogger(__name__)


def get_settings(db: Session) -> Setting:
    """Return the settings row, creating it with defaults on first read."""
    setting = db.get(Setting, SETTING_ID)
    if not setting:
        setting = Setting(id=SETTING_ID)
        db.add(setting)
        db.commit()
        db.refresh(setting)
    return setting


def update_settings(db: Session, setting_data: SettingUpdate) -> Setting:
    setting = get_settings(db)
    for field, value in setting_data.model_dump(exclude_unset=True).items():
        if field == "site_title" and value is None:
            continue
        setattr(setting, field, value)
    db.commit()
    db.refresh(setting)
    logger.info("Site settings updated")
    return setting

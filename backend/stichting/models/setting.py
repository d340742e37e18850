"""
Site-wide settings, stored as a single row.
"""
from sqlalchemy import Column, String, Text
from stichting.db.base import BaseModel

SETTING_ID = 1


class Setting(BaseModel):
    """Singleton row (id 1) with display configuration."""
    __tablename__ = "settings"

    site_title = Column(String(200), nullable=False, default="de Stichting")
    intro_text = Column(Text, nullable=True)
    contact_email = Column(String(200), nullable=True)

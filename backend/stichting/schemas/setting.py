"""
Pydantic schemas for site settings.
"""
from pydantic import EmailStr, Field
from typing import Optional
from stichting.schemas.base import CamelModel, RequestModel


class SettingResponse(CamelModel):
    id: int
    site_title: str
    intro_text: Optional[str] = None
    contact_email: Optional[str] = None


class SettingUpdate(RequestModel):
    site_title: Optional[str] = Field(None, min_length=1, max_length=200)
    intro_text: Optional[str] = None
    contact_email: Optional[EmailStr] = None

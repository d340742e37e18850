"""
Pydantic schemas for uploads.
"""
from typing import Optional
from datetime import datetime
from stichting.schemas.base import CamelModel


class UploadResponse(CamelModel):
    id: int
    user_id: int
    filename: str
    original: str
    mimetype: Optional[str] = None
    size: int
    created_at: datetime


class UploadResult(CamelModel):
    ok: bool = True
    file: UploadResponse

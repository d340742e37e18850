"""
Pydantic schemas for uitje participants.
"""
from typing import Optional
from datetime import datetime
from stichting.models.participant import ParticipantStatus
from stichting.schemas.base import CamelModel, RequestModel
from stichting.schemas.user import UserSummary


class ParticipantResponse(CamelModel):
    id: int
    uitje_id: int
    user_id: int
    status: ParticipantStatus
    can_cancel: bool
    prepaid: bool
    postpaid: bool
    created_at: datetime
    updated_at: datetime


class ParticipantWithUser(ParticipantResponse):
    user: UserSummary


class PayFlagsUpdate(RequestModel):
    """Both flags are written; a missing flag means not paid."""
    prepaid: Optional[bool] = False
    postpaid: Optional[bool] = False

"""
Pydantic schemas for Uitje entity and its sub-activities.
"""
from pydantic import Field, field_validator
from typing import List, Optional
import datetime as dt
from stichting.schemas.base import CamelModel, RequestModel
from stichting.schemas.participant import ParticipantResponse, ParticipantWithUser

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


def as_utc(value: Optional[dt.datetime]) -> Optional[dt.datetime]:
    """Normalize a deadline to aware UTC; naive values are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=dt.timezone.utc)
    return value.astimezone(dt.timezone.utc)


# Sub-activities

class EventBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    start_time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    end_time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    price_pp: Optional[float] = Field(None, ge=0, alias="pricePP")
    sort_order: int = Field(0, alias="order")


class EventCreate(EventBase, RequestModel):
    pass


class EventResponse(EventBase):
    id: int
    uitje_id: int


class MealBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    location: Optional[str] = None
    start_time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    end_time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    sort_order: int = Field(0, alias="order")


class MealCreate(MealBase, RequestModel):
    pass


class MealResponse(MealBase):
    id: int
    uitje_id: int


class TravelBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    start_time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    end_time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    mode: Optional[str] = Field(None, max_length=30)
    from_location: Optional[str] = Field(None, alias="from")
    to_location: Optional[str] = Field(None, alias="to")
    sort_order: int = Field(0, alias="order")


class TravelCreate(TravelBase, RequestModel):
    pass


class TravelResponse(TravelBase):
    id: int
    uitje_id: int


# Uitje

class UitjePublic(CamelModel):
    """Fields safe to show on the public website."""
    id: int
    date: dt.date
    title: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    published: bool
    show_on_frontend: bool


class UitjeFields(CamelModel):
    """Editable uitje fields; all optional so updates can be partial."""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    date: Optional[dt.date] = None
    description: Optional[str] = None
    image_url: Optional[str] = Field(None, max_length=500)
    collect_point: Optional[str] = Field(None, max_length=200)
    collect_time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    registration_until: Optional[dt.datetime] = None
    cancel_until: Optional[dt.datetime] = None
    published: Optional[bool] = None
    show_on_frontend: Optional[bool] = None
    maps_url: Optional[str] = Field(None, max_length=500)
    terms_url: Optional[str] = Field(None, max_length=500)

    @field_validator("registration_until", "cancel_until")
    @classmethod
    def deadlines_in_utc(cls, value):
        return as_utc(value)


class UitjeCreate(UitjeFields, RequestModel):
    """Schema for uitje creation, optionally with its programme."""
    title: str = Field(..., min_length=1, max_length=200)
    date: dt.date
    published: bool = False
    show_on_frontend: bool = False
    events: List[EventCreate] = []
    meals: List[MealCreate] = []
    travels: List[TravelCreate] = []


class UitjeUpdate(UitjeFields, RequestModel):
    """Schema for uitje update. A supplied sub-activity list replaces the stored one."""
    events: Optional[List[EventCreate]] = None
    meals: Optional[List[MealCreate]] = None
    travels: Optional[List[TravelCreate]] = None


class UitjeResponse(CamelModel):
    """Schema for uitje response."""
    id: int
    title: str
    date: dt.date
    description: Optional[str] = None
    image_url: Optional[str] = None
    collect_point: Optional[str] = None
    collect_time: Optional[str] = None
    registration_until: Optional[dt.datetime] = None
    cancel_until: Optional[dt.datetime] = None
    published: bool
    show_on_frontend: bool
    maps_url: Optional[str] = None
    terms_url: Optional[str] = None
    created_at: dt.datetime
    updated_at: dt.datetime

    # Stored without offset; the values are UTC
    @field_validator("registration_until", "cancel_until")
    @classmethod
    def deadlines_in_utc(cls, value):
        return as_utc(value)


class UitjeAdminResponse(UitjeResponse):
    """Admin overview row with registrations attached."""
    participants: List[ParticipantResponse] = []


class UitjeDetailResponse(UitjeResponse):
    """Schema for detailed uitje response with programme and participants."""
    events: List[EventResponse] = []
    meals: List[MealResponse] = []
    travels: List[TravelResponse] = []
    participants: List[ParticipantWithUser] = []

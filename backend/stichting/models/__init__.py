"""Models package - Import all models for SQLAlchemy registration."""
from stichting.models.user import User, Role
from stichting.models.outing import Uitje, Event, Meal, Travel
from stichting.models.participant import Participant, ParticipantStatus
from stichting.models.upload import Upload
from stichting.models.setting import Setting, SETTING_ID

__all__ = [
    "User",
    "Role",
    "Uitje",
    "Event",
    "Meal",
    "Travel",
    "Participant",
    "ParticipantStatus",
    "Upload",
    "Setting",
    "SETTING_ID",
]

"""
Participant model: a user's registration for an uitje.
"""
from sqlalchemy import Column, Boolean, Enum as SQLEnum, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from stichting.db.base import BaseModel
import enum


class ParticipantStatus(str, enum.Enum):
    """Participant status enumeration."""
    GOING = "GOING"
    CANCELED = "CANCELED"


class Participant(BaseModel):
    """Junction table for Uitje and User with status and payment flags."""
    __tablename__ = "uitje_participants"

    uitje_id = Column(Integer, ForeignKey("uitjes.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(SQLEnum(ParticipantStatus), default=ParticipantStatus.GOING, nullable=False)
    can_cancel = Column(Boolean, default=True, nullable=False)  # Cleared by a self-cancel
    prepaid = Column(Boolean, default=False, nullable=False)
    postpaid = Column(Boolean, default=False, nullable=False)

    # Relationships
    uitje = relationship("Uitje", back_populates="participants")
    user = relationship("User", back_populates="participations")

    # Unique constraint: one registration per user per uitje
    __table_args__ = (
        UniqueConstraint('uitje_id', 'user_id', name='uq_uitje_user_participant'),
    )

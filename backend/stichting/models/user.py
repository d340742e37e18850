"""
User model for authentication and the member directory.
"""
from sqlalchemy import Column, String, Boolean, Text, Enum as SQLEnum
from sqlalchemy.orm import relationship
from stichting.db.base import BaseModel
import enum


class Role(str, enum.Enum):
    """The two roles every authorization decision is made on."""
    ADMIN = "ADMIN"
    USER = "USER"


class User(BaseModel):
    """Member or administrator of the foundation."""
    __tablename__ = "users"

    username = Column(String(50), unique=True, nullable=False, index=True)
    first_name = Column(String(100), nullable=False, default="")
    tussenvoegsel = Column(String(30), nullable=True)
    last_name = Column(String(100), nullable=False, default="")
    phone = Column(String(30), nullable=True)
    role = Column(SQLEnum(Role), default=Role.USER, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    must_change_password = Column(Boolean, default=True, nullable=False)
    special_notes = Column(Text, nullable=True)

    # Relationships
    participations = relationship("Participant", back_populates="user", cascade="all, delete-orphan")
    uploads = relationship("Upload", back_populates="user")

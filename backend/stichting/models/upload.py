"""
Upload model: metadata for a file stored in the upload directory.
"""
from sqlalchemy import Column, String, ForeignKey, Integer
from sqlalchemy.orm import relationship
from stichting.db.base import BaseModel


class Upload(BaseModel):
    __tablename__ = "uploads"

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    filename = Column(String(300), nullable=False, unique=True)  # Name on disk
    original = Column(String(255), nullable=False)
    mimetype = Column(String(100), nullable=True)
    size = Column(Integer, nullable=False, default=0)

    user = relationship("User", back_populates="uploads")

"""
Uitje (outing) model and its ordered sub-activities.
"""
from sqlalchemy import Column, String, Date, DateTime, Boolean, Text, Numeric, ForeignKey, Integer
from sqlalchemy.orm import relationship
from stichting.db.base import BaseModel


class Uitje(BaseModel):
    """A day out: programme of events, meals and travel legs."""
    __tablename__ = "uitjes"

    title = Column(String(200), nullable=False)
    date = Column(Date, nullable=False, index=True)
    description = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=True)
    collect_point = Column(String(200), nullable=True)
    collect_time = Column(String(5), nullable=True)  # "HH:MM"
    registration_until = Column(DateTime(timezone=True), nullable=True)
    cancel_until = Column(DateTime(timezone=True), nullable=True)
    published = Column(Boolean, default=False, nullable=False)
    show_on_frontend = Column(Boolean, default=False, nullable=False, index=True)
    maps_url = Column(String(500), nullable=True)
    terms_url = Column(String(500), nullable=True)

    # Relationships
    events = relationship(
        "Event", back_populates="uitje", cascade="all, delete-orphan",
        order_by="Event.sort_order", passive_deletes=True
    )
    meals = relationship(
        "Meal", back_populates="uitje", cascade="all, delete-orphan",
        order_by="Meal.sort_order", passive_deletes=True
    )
    travels = relationship(
        "Travel", back_populates="uitje", cascade="all, delete-orphan",
        order_by="Travel.sort_order", passive_deletes=True
    )
    participants = relationship(
        "Participant", back_populates="uitje", cascade="all, delete-orphan",
        order_by="Participant.id", passive_deletes=True
    )


class Event(BaseModel):
    """Paid activity within an uitje."""
    __tablename__ = "events"

    uitje_id = Column(Integer, ForeignKey("uitjes.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    start_time = Column(String(5), nullable=True)
    end_time = Column(String(5), nullable=True)
    price_pp = Column(Numeric(10, 2, asdecimal=False), nullable=True)  # Price per person
    sort_order = Column("order", Integer, default=0, nullable=False)

    uitje = relationship("Uitje", back_populates="events")


class Meal(BaseModel):
    __tablename__ = "meals"

    uitje_id = Column(Integer, ForeignKey("uitjes.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    location = Column(String(200), nullable=True)
    start_time = Column(String(5), nullable=True)
    end_time = Column(String(5), nullable=True)
    sort_order = Column("order", Integer, default=0, nullable=False)

    uitje = relationship("Uitje", back_populates="meals")


class Travel(BaseModel):
    """Travel leg between two places."""
    __tablename__ = "travels"

    uitje_id = Column(Integer, ForeignKey("uitjes.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    start_time = Column(String(5), nullable=True)
    end_time = Column(String(5), nullable=True)
    mode = Column(String(30), nullable=True)  # car, bus, train, ...
    from_location = Column("from", String(200), nullable=True)
    to_location = Column("to", String(200), nullable=True)
    sort_order = Column("order", Integer, default=0, nullable=False)

    uitje = relationship("Uitje", back_populates="travels")

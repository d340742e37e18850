"""
Uitje catalog service: listing, detail and admin CRUD.
"""
import logging
from typing import List
from sqlalchemy.orm import Session, selectinload
from stichting.core.exceptions import NotFound
from stichting.models.outing import Uitje, Event, Meal, Travel
from stichting.models.participant import Participant
from stichting.schemas.outing import UitjeCreate, UitjeUpdate

logger = logging.getLogger(__name__)

PROGRAMME_FIELDS = {"events", "meals", "travels"}
NON_NULLABLE_FIELDS = ("title", "date", "published", "show_on_frontend")


def list_public_uitjes(db: Session) -> List[Uitje]:
    """Uitjes flagged for the public website, newest date first."""
    return db.query(Uitje).filter(
        Uitje.show_on_frontend.is_(True)
    ).order_by(Uitje.date.desc()).all()


def list_all_uitjes(db: Session) -> List[Uitje]:
    """Every uitje regardless of flags, with registrations loaded."""
    return db.query(Uitje).options(
        selectinload(Uitje.participants)
    ).order_by(Uitje.date.desc()).all()


def get_uitje(db: Session, uitje_id: int) -> Uitje:
    uitje = db.get(Uitje, uitje_id)
    if not uitje:
        raise NotFound("Not found")
    return uitje


def get_uitje_detail(db: Session, uitje_id: int) -> Uitje:
    """Uitje with its programme and participants (each with user)."""
    uitje = db.query(Uitje).options(
        selectinload(Uitje.events),
        selectinload(Uitje.meals),
        selectinload(Uitje.travels),
        selectinload(Uitje.participants).selectinload(Participant.user)
    ).filter(Uitje.id == uitje_id).first()
    if not uitje:
        raise NotFound("Not found")
    return uitje


def _build_programme(uitje: Uitje, data) -> None:
    if data.events is not None:
        uitje.events = [Event(**item.model_dump()) for item in data.events]
    if data.meals is not None:
        uitje.meals = [Meal(**item.model_dump()) for item in data.meals]
    if data.travels is not None:
        uitje.travels = [Travel(**item.model_dump()) for item in data.travels]


def create_uitje(db: Session, uitje_data: UitjeCreate) -> Uitje:
    """Create an uitje, including any events, meals and travels supplied."""
    uitje = Uitje(**uitje_data.model_dump(exclude=PROGRAMME_FIELDS))
    _build_programme(uitje, uitje_data)
    db.add(uitje)
    db.commit()
    db.refresh(uitje)
    logger.info(f"Created uitje {uitje.id} '{uitje.title}' on {uitje.date}")
    return uitje


def update_uitje(db: Session, uitje_id: int, uitje_data: UitjeUpdate) -> Uitje:
    """Apply supplied fields; a supplied programme list replaces the old one."""
    uitje = get_uitje(db, uitje_id)
    changes = uitje_data.model_dump(exclude_unset=True, exclude=PROGRAMME_FIELDS)
    for field, value in changes.items():
        if field in NON_NULLABLE_FIELDS and value is None:
            continue
        setattr(uitje, field, value)
    _build_programme(uitje, uitje_data)
    db.commit()
    db.refresh(uitje)
    logger.info(f"Updated uitje {uitje.id}")
    return uitje


def delete_uitje(db: Session, uitje_id: int) -> None:
    """Delete an uitje; programme and participants go with it."""
    uitje = get_uitje(db, uitje_id)
    db.delete(uitje)
    db.commit()
    logger.info(f"Deleted uitje {uitje_id}")

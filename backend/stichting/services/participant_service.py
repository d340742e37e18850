"""
Participant lifecycle for an uitje.

Per (uitje, user) pair: unregistered -> GOING -> CANCELED. A member can
cancel once; after that ``can_cancel`` is false until an admin resets it.
Payment flags are independent of status.
"""
import logging
from datetime import datetime, timezone
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from stichting.core.exceptions import AlreadyEnrolled, CancelNotAllowed, NotFound, RegistrationClosed
from stichting.models.participant import Participant, ParticipantStatus
from stichting.services.outing_service import get_uitje

logger = logging.getLogger(__name__)


def _deadline_passed(deadline: Optional[datetime]) -> bool:
    if deadline is None:
        return False
    if deadline.tzinfo is None:
        # SQLite hands back naive datetimes; they are stored as UTC
        deadline = deadline.replace(tzinfo=timezone.utc)
    return datetime.now(timezone.utc) > deadline


def get_participant(db: Session, uitje_id: int, user_id: int) -> Optional[Participant]:
    return db.query(Participant).filter(
        Participant.uitje_id == uitje_id,
        Participant.user_id == user_id
    ).first()


def _require_participant(db: Session, uitje_id: int, user_id: int) -> Participant:
    participant = get_participant(db, uitje_id, user_id)
    if not participant:
        raise NotFound("Participant not found")
    return participant


def enrol(db: Session, uitje_id: int, user_id: int, enforce_deadlines: bool = False) -> Participant:
    """Register a user as GOING, creating the row or reviving a cancelled one."""
    uitje = get_uitje(db, uitje_id)
    if enforce_deadlines and _deadline_passed(uitje.registration_until):
        raise RegistrationClosed()

    participant = get_participant(db, uitje_id, user_id)
    if participant:
        participant.status = ParticipantStatus.GOING
    else:
        participant = Participant(
            uitje_id=uitje_id,
            user_id=user_id,
            status=ParticipantStatus.GOING
        )
        db.add(participant)

    try:
        db.commit()
    except IntegrityError:
        # A concurrent enrol inserted the same pair first
        db.rollback()
        raise AlreadyEnrolled()

    db.refresh(participant)
    logger.info(f"User {user_id} enrolled for uitje {uitje_id}")
    return participant


def cancel(db: Session, uitje_id: int, user_id: int, enforce_deadlines: bool = False) -> Participant:
    """Self-cancel. Allowed once; the flag can only be restored by an admin."""
    participant = get_participant(db, uitje_id, user_id)
    if not participant or not participant.can_cancel:
        raise CancelNotAllowed()
    if enforce_deadlines and _deadline_passed(participant.uitje.cancel_until):
        raise CancelNotAllowed("Cancellation deadline has passed. Contact admin.")

    participant.status = ParticipantStatus.CANCELED
    participant.can_cancel = False
    db.commit()
    db.refresh(participant)
    logger.info(f"User {user_id} cancelled for uitje {uitje_id}")
    return participant


def reset_cancel(db: Session, uitje_id: int, user_id: int) -> Participant:
    """Admin: put the user back to GOING and allow one more cancel."""
    participant = _require_participant(db, uitje_id, user_id)
    participant.can_cancel = True
    participant.status = ParticipantStatus.GOING
    db.commit()
    db.refresh(participant)
    logger.info(f"Cancel reset for user {user_id} on uitje {uitje_id}")
    return participant


def set_pay_flags(db: Session, uitje_id: int, user_id: int, prepaid: bool, postpaid: bool) -> Participant:
    """Admin: overwrite both payment flags."""
    participant = _require_participant(db, uitje_id, user_id)
    participant.prepaid = bool(prepaid)
    participant.postpaid = bool(postpaid)
    db.commit()
    db.refresh(participant)
    return participant

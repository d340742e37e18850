"""
Uitje routes: public catalog, admin CRUD and participant lifecycle.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from stichting.api.dependencies import get_current_identity, get_settings, require_admin
from stichting.core.config import Settings
from stichting.core.security import Identity
from stichting.db.session import get_db
from stichting.schemas.base import OkResponse
from stichting.schemas.outing import (
    UitjeAdminResponse, UitjeCreate, UitjeDetailResponse,
    UitjePublic, UitjeResponse, UitjeUpdate
)
from stichting.schemas.participant import ParticipantResponse, PayFlagsUpdate
from stichting.services import outing_service, participant_service

router = APIRouter(prefix="/uitjes", tags=["uitjes"])


@router.get("", response_model=List[UitjePublic])
async def list_public_uitjes(db: Session = Depends(get_db)):
    """Uitjes shown on the public website."""
    return outing_service.list_public_uitjes(db)


@router.get("/admin", response_model=List[UitjeAdminResponse])
async def list_all_uitjes(
    admin: Identity = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """All uitjes with their participants."""
    return outing_service.list_all_uitjes(db)


@router.get("/{uitje_id}", response_model=UitjeDetailResponse)
async def get_uitje(uitje_id: int, db: Session = Depends(get_db)):
    """Get uitje details with programme and participants."""
    return outing_service.get_uitje_detail(db, uitje_id)


@router.post("", response_model=UitjeResponse)
async def create_uitje(
    uitje_data: UitjeCreate,
    admin: Identity = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Create a new uitje."""
    return outing_service.create_uitje(db, uitje_data)


@router.put("/{uitje_id}", response_model=UitjeResponse)
async def update_uitje(
    uitje_id: int,
    uitje_data: UitjeUpdate,
    admin: Identity = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Update an uitje."""
    return outing_service.update_uitje(db, uitje_id, uitje_data)


@router.delete("/{uitje_id}", response_model=OkResponse)
async def delete_uitje(
    uitje_id: int,
    admin: Identity = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Delete an uitje with its programme and participants."""
    outing_service.delete_uitje(db, uitje_id)
    return {"ok": True}


@router.post("/{uitje_id}/enrol", response_model=ParticipantResponse)
async def enrol(
    uitje_id: int,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Register the current user for an uitje."""
    return participant_service.enrol(db, uitje_id, identity.id, settings.ENFORCE_DEADLINES)


@router.post("/{uitje_id}/cancel", response_model=ParticipantResponse)
async def cancel(
    uitje_id: int,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Cancel the current user's registration (once)."""
    return participant_service.cancel(db, uitje_id, identity.id, settings.ENFORCE_DEADLINES)


@router.post("/{uitje_id}/reset-cancel/{user_id}", response_model=ParticipantResponse)
async def reset_cancel(
    uitje_id: int,
    user_id: int,
    admin: Identity = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Allow a user to cancel again and mark them as going."""
    return participant_service.reset_cancel(db, uitje_id, user_id)


@router.post("/{uitje_id}/payflags/{user_id}", response_model=ParticipantResponse)
async def set_pay_flags(
    uitje_id: int,
    user_id: int,
    flags: Optional[PayFlagsUpdate] = None,
    admin: Identity = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Set prepaid/postpaid flags for a participant. No body clears both."""
    flags = flags or PayFlagsUpdate()
    return participant_service.set_pay_flags(db, uitje_id, user_id, flags.prepaid, flags.postpaid)

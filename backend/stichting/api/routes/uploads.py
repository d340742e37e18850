"""
Upload routes: store a file and serve stored files by name.
"""
from fastapi import APIRouter, Depends, File, Response, UploadFile, status
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session
from stichting.api.dependencies import get_current_identity, get_settings
from stichting.core.config import Settings
from stichting.core.security import Identity
from stichting.db.session import get_db
from stichting.schemas.upload import UploadResult
from stichting.services import upload_service

router = APIRouter(tags=["uploads"])


@router.post("/upload", response_model=UploadResult)
async def upload_file(
    file: UploadFile = File(...),
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Store one file under a sanitized, timestamped name."""
    upload = await upload_service.save_upload(
        db, file, identity.id, settings.UPLOAD_DIR, settings.MAX_UPLOAD_SIZE
    )
    return {"ok": True, "file": upload}


@router.get("/uploads/{filename}")
async def get_upload(filename: str, settings: Settings = Depends(get_settings)):
    """Serve a stored file. Unknown or unsafe names give an empty 404."""
    path = upload_service.resolve_upload_path(settings.UPLOAD_DIR, filename)
    if path is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return FileResponse(path)

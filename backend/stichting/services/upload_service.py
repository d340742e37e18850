"""
File intake: store uploaded files on disk and record their metadata.
"""
import logging
import re
import time
from pathlib import Path
from typing import Optional
from fastapi import UploadFile
from sqlalchemy.orm import Session
from stichting.core.exceptions import InvalidInput
from stichting.models.upload import Upload

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024
UNSAFE_UPLOAD_CHARS = re.compile(r"[^\w.\-]")
UNSAFE_LOOKUP_CHARS = re.compile(r"[^-\w.]")


def sanitize_filename(original: str) -> str:
    """Replace everything except word characters, dots and hyphens with '_'."""
    return UNSAFE_UPLOAD_CHARS.sub("_", original or "file")


def build_stored_name(upload_dir: Path, original: str) -> str:
    """``{epoch millis}-{sanitized name}``, bumped until it is free on disk."""
    safe = sanitize_filename(original)
    timestamp = int(time.time() * 1000)
    name = f"{timestamp}-{safe}"
    while (upload_dir / name).exists():
        timestamp += 1
        name = f"{timestamp}-{safe}"
    return name


async def save_upload(db: Session, file: UploadFile, user_id: int, upload_dir: str, max_size: int) -> Upload:
    """Write the file into the upload directory and insert its metadata row.

    The disk write and the insert are not one transaction. If the insert
    fails the written file is removed before the error propagates.
    """
    directory = Path(upload_dir)
    directory.mkdir(parents=True, exist_ok=True)
    stored_name = build_stored_name(directory, file.filename)
    target = directory / stored_name

    size = 0
    try:
        with open(target, "wb") as buffer:
            while True:
                chunk = await file.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > max_size:
                    raise InvalidInput(f"File too large (max {max_size} bytes)")
                buffer.write(chunk)
    except InvalidInput:
        target.unlink(missing_ok=True)
        raise

    upload = Upload(
        user_id=user_id,
        filename=stored_name,
        original=file.filename or stored_name,
        mimetype=file.content_type,
        size=size
    )
    db.add(upload)
    try:
        db.commit()
    except Exception:
        db.rollback()
        target.unlink(missing_ok=True)
        raise
    db.refresh(upload)
    logger.info(f"User {user_id} uploaded '{upload.original}' as {stored_name} ({size} bytes)")
    return upload


def resolve_upload_path(upload_dir: str, filename: str) -> Optional[Path]:
    """Map a requested name to a file inside the upload directory, or None."""
    safe = UNSAFE_LOOKUP_CHARS.sub("", filename or "")
    if not safe:
        return None
    root = Path(upload_dir).resolve()
    candidate = (root / safe).resolve()
    if candidate.parent != root or not candidate.is_file():
        return None
    return candidate

"""
User directory service.
"""
import logging
from typing import List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from stichting.core.exceptions import Conflict, Forbidden, NotFound
from stichting.core.security import Identity, get_password_hash
from stichting.models.user import User
from stichting.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)

NON_NULLABLE_FIELDS = ("username", "first_name", "last_name", "role")


def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.id.asc()).all()


def get_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if not user:
        raise NotFound("User not found")
    return user


def _ensure_username_free(db: Session, username: str, exclude_id: int = None) -> None:
    query = db.query(User).filter(User.username == username)
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    if query.first():
        raise Conflict("Username already exists")


def _commit_user(db: Session, user: User) -> User:
    # The unique index still catches a race between check and insert
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("Username already exists")
    db.refresh(user)
    return user


def create_user(db: Session, user_data: UserCreate, default_password: str) -> User:
    """Create a user with the default password; they must change it on first login."""
    _ensure_username_free(db, user_data.username)

    new_user = User(
        **user_data.model_dump(),
        hashed_password=get_password_hash(default_password),
        must_change_password=True
    )
    db.add(new_user)
    _commit_user(db, new_user)
    logger.info(f"Created user {new_user.id} ({new_user.username}) with role {new_user.role.value}")
    return new_user


def update_user(db: Session, user_id: int, user_data: UserUpdate, acting: Identity) -> User:
    """Update profile fields. Users may edit themselves; admins may edit anyone."""
    if not acting.is_admin and acting.id != user_id:
        raise Forbidden()

    user = get_user(db, user_id)
    changes = user_data.model_dump(exclude_unset=True)

    if "role" in changes and changes["role"] != user.role and not acting.is_admin:
        raise Forbidden("Only an admin can change roles")
    if changes.get("username") and changes["username"] != user.username:
        _ensure_username_free(db, changes["username"], exclude_id=user.id)

    for field, value in changes.items():
        if field in NON_NULLABLE_FIELDS and value is None:
            continue
        setattr(user, field, value)

    return _commit_user(db, user)


def reset_password(db: Session, user_id: int, default_password: str) -> None:
    """Reset a user's password to the default and require a change."""
    user = get_user(db, user_id)
    user.hashed_password = get_password_hash(default_password)
    user.must_change_password = True
    db.commit()
    logger.info(f"Password reset for user {user.id} ({user.username})")

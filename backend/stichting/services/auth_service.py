"""
Authentication service: credential checks, token issue and password changes.
"""
import logging
from typing import Tuple
from sqlalchemy.orm import Session
from stichting.core.config import Settings
from stichting.core.exceptions import InvalidCredentials, InvalidInput, Unauthorized
from stichting.core.security import (
    DUMMY_PASSWORD_HASH, Identity, create_access_token, get_password_hash, verify_password
)
from stichting.models.user import User

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 4


def authenticate_user(db: Session, username: str, password: str) -> User:
    """Return the user for valid credentials, else raise InvalidCredentials.

    Unknown usernames and wrong passwords give the same error and cost one
    hash comparison each.
    """
    user = db.query(User).filter(User.username == username).first()
    hashed = user.hashed_password if user else DUMMY_PASSWORD_HASH
    password_ok = verify_password(password, hashed)
    if not user or not password_ok:
        logger.info(f"Failed login attempt for username '{username}'")
        raise InvalidCredentials()
    return user


def login(db: Session, username: str, password: str, config: Settings) -> Tuple[str, User]:
    """Check credentials and issue an access token carrying id and role."""
    if not username or not password:
        raise InvalidInput("Provide username and password")

    user = authenticate_user(db, username, password)
    token = create_access_token(
        data={"sub": str(user.id), "role": user.role.value},
        config=config
    )
    logger.info(f"User {user.id} ({user.username}) logged in")
    return token, user


def get_current_user(db: Session, identity: Identity) -> User:
    """Load the user behind a token; a deleted account is no longer authenticated."""
    user = db.get(User, identity.id)
    if not user:
        raise Unauthorized("User not found")
    return user


def change_password(db: Session, identity: Identity, new_password: str) -> None:
    """Set a new password for the caller and clear the must-change flag."""
    if not new_password or len(new_password) < MIN_PASSWORD_LENGTH:
        raise InvalidInput("Password too short")

    user = get_current_user(db, identity)
    user.hashed_password = get_password_hash(new_password)
    user.must_change_password = False
    db.commit()
    logger.info(f"User {user.id} changed password")

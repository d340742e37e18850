"""
Security utilities for JWT authentication and password hashing.
"""
from datetime import datetime, timedelta, timezone
from dataclasses import dataclass
from typing import Optional
import hashlib
import bcrypt
from jose import JWTError, jwt
from stichting.core.config import Settings, settings as default_settings
from stichting.models.user import Role


def _pre_hash_password(password: str) -> bytes:
    """
    Pre-hash password with SHA256 to support passwords longer than 72 bytes.
    Returns bytes (32 bytes) which is well under bcrypt's 72-byte limit.
    """
    return hashlib.sha256(password.encode('utf-8')).digest()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    pre_hashed = _pre_hash_password(plain_password)
    try:
        return bcrypt.checkpw(pre_hashed, hashed_password.encode('utf-8'))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def get_password_hash(password: str) -> str:
    """
    Hash a password.
    Pre-hashes with SHA256 first to support passwords longer than 72 bytes.
    Uses bcrypt directly to avoid passlib's backend detection issues.
    """
    pre_hashed = _pre_hash_password(password)
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(pre_hashed, salt)
    return hashed.decode('utf-8')


# Compared against when the username does not exist, so a failed login
# costs one bcrypt check either way.
DUMMY_PASSWORD_HASH = get_password_hash("not-a-real-password")


def create_access_token(
    data: dict,
    expires_delta: Optional[timedelta] = None,
    config: Settings = default_settings
) -> str:
    """Create a JWT access token."""
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(days=config.ACCESS_TOKEN_EXPIRE_DAYS)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, config.SECRET_KEY, algorithm=config.ALGORITHM)
    return encoded_jwt


def decode_access_token(token: str, config: Settings = default_settings) -> Optional[dict]:
    """Decode and verify a JWT token."""
    try:
        payload = jwt.decode(token, config.SECRET_KEY, algorithms=[config.ALGORITHM])
        return payload
    except JWTError:
        return None


@dataclass(frozen=True)
class Identity:
    """Who is making the request, as read from the token claims."""
    id: int
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


def identity_from_payload(payload: Optional[dict]) -> Optional[Identity]:
    """Build an Identity from decoded claims, or None if they are incomplete."""
    if not payload:
        return None
    try:
        return Identity(id=int(payload["sub"]), role=Role(payload["role"]))
    except (KeyError, TypeError, ValueError):
        return None

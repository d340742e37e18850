"""
Request dependencies: settings, bearer-token identity and the admin gate.
"""
from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from stichting.core.config import Settings
from stichting.core.exceptions import Forbidden, Unauthorized
from stichting.core.security import Identity, decode_access_token, identity_from_payload

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings)
) -> Identity:
    """Decode the bearer token into an Identity or raise Unauthorized."""
    if credentials is None:
        raise Unauthorized("No token")

    identity = identity_from_payload(decode_access_token(credentials.credentials, settings))
    if identity is None:
        raise Unauthorized("Invalid token")
    return identity


def require_admin(identity: Identity = Depends(get_current_identity)) -> Identity:
    """Only let ADMIN identities through."""
    if not identity.is_admin:
        raise Forbidden("Admin only")
    return identity

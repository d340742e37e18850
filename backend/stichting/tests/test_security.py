"""
Unit tests for password hashing and token claims.
"""
from stichting.core.security import (
    Identity, get_password_hash, identity_from_payload, verify_password
)
from stichting.models import Role


def test_password_hash_round_trip():
    hashed = get_password_hash("1234")
    assert hashed != "1234"
    assert verify_password("1234", hashed)
    assert not verify_password("4321", hashed)


def test_verify_password_with_non_bcrypt_value():
    assert verify_password("1234", "plain-text") is False


def test_identity_from_payload():
    assert identity_from_payload({"sub": "7", "role": "ADMIN"}) == Identity(id=7, role=Role.ADMIN)
    assert identity_from_payload({"sub": "7", "role": "USER"}).is_admin is False
    assert identity_from_payload({"sub": "7"}) is None
    assert identity_from_payload({"sub": "x", "role": "USER"}) is None
    assert identity_from_payload({"sub": "7", "role": "OWNER"}) is None
    assert identity_from_payload(None) is None

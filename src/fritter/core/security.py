"""Credential digests and bearer tokens for the identity provider."""
from __future__ import annotations

import hashlib
from datetime import UTC, datetime, timedelta

from jose import jwt

from fritter.core.settings import settings


def hash_password(password: str) -> str:
    """Return a SHA-256 hex digest of the provided password."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def create_access_token(user_id: int, expires_delta: timedelta | None = None) -> str:
    """Issue a signed JWT whose subject is the user identifier.

    Args:
        user_id: Primary key of the authenticated user.
        expires_delta: Optional override of the configured token lifetime.

    Returns:
        Encoded JWT string.
    """
    lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "sub": str(user_id),
        "exp": datetime.now(UTC) + lifetime,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> int | None:
    """Return the user identifier carried by a token, or None if it has no subject.

    Raises:
        jose.JWTError: If the token signature or expiry is invalid.
        ValueError: If the subject is not an integer identifier.
    """
    payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    subject = payload.get("sub")
    if subject is None:
        return None
    return int(subject)

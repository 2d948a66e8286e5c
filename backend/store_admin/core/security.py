"""Bearer token decoding.

Tokens are issued by the external identity provider; this service only needs
the subject claim (the user id) out of them.
"""

from datetime import datetime, timedelta, timezone

from jose import jwt

from store_admin.core.config import settings

DEFAULT_TOKEN_TTL = timedelta(hours=8)


def create_access_token(user_id: str, expires_delta: timedelta | None = None) -> str:
    """Issue a token shaped like the identity provider's.

    Production never calls this; it exists for local tooling and tests that
    need a signed bearer token for a given user id.
    """
    expire = datetime.now(timezone.utc) + (expires_delta or DEFAULT_TOKEN_TTL)
    payload = {"sub": user_id, "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> dict:
    """Decode and validate JWT. Raises JWTError on failure."""
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])

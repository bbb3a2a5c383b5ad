"""
Bearer tokens for admin sessions.

Tokens are HS256 JWTs whose subject is the user id; the role rides along as
a claim for logging only. Permission checks always reload the user record.
"""

import os
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt

from storefront.domain.entities import User

SECRET_KEY = os.environ.get("STOREFRONT_SECRET_KEY", "dev-secret-unsafe")
ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(hours=24)


def issue_token(user: User, ttl: timedelta | None = None, now_utc: datetime | None = None) -> str:
    """Sign a session token for `user`; `now_utc` pins the issue time in tests."""
    issued_at = now_utc or datetime.now(UTC)
    claims = {
        "sub": user.id,
        "role": user.role,
        "iat": issued_at,
        "exp": issued_at + (ttl or DEFAULT_TTL),
    }
    return str(jwt.encode(claims, SECRET_KEY, algorithm=ALGORITHM))


def token_subject(token: str) -> str | None:
    """User id carried by a valid, unexpired token, else None."""
    try:
        claims: dict[str, Any] = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        return None
    subject = claims.get("sub")
    return subject if isinstance(subject, str) and subject else None

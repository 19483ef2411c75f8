"""Issues and validates signed, time-limited admin session tokens."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from jose.utils import base64url_decode, base64url_encode

from portfolio.config import settings


@dataclass(frozen=True)
class TokenClaims:
    email: str
    is_admin: bool


def issue_token(email: str, *, now: Optional[datetime] = None) -> str:
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "sub": email,
        "email": email,
        "isAdmin": True,
        "iat": issued_at,
        "exp": issued_at + timedelta(seconds=settings.SESSION_MAX_AGE_SECONDS),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def _has_canonical_signature(token: str) -> bool:
    # base64url decoding ignores the unused low bits of the last character
    parts = token.split(".")
    if len(parts) != 3 or not parts[2]:
        return False
    try:
        signature = parts[2].encode("ascii")
        return base64url_encode(base64url_decode(signature)) == signature
    except ValueError:
        return False


def validate_token(token: Optional[str]) -> Optional[TokenClaims]:
    """Return the token claims, or None for a malformed, tampered or expired token."""
    if not token or not isinstance(token, str):
        return None
    if not _has_canonical_signature(token):
        return None
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require_exp": True},
        )
    except JWTError:
        return None
    email = payload.get("email")
    if not isinstance(email, str) or not email:
        return None
    return TokenClaims(email=email, is_admin=payload.get("isAdmin") is True)

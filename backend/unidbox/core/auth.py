"""
Session handling for the UNiDBox backend
Reads the session cookie (an HS256 JWT) and provides the user context
and the cookie policy used when clearing it.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi import Request
from jose import JWTError, jwt
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from unidbox.core.config import settings

COOKIE_NAME = "app_session_id"
JWT_ALGORITHM = "HS256"
SESSION_TTL = timedelta(days=365)

# Role hierarchy: admin > user
ROLE_HIERARCHY = {
    "admin": 2,
    "user": 1,
}


class SessionUser(BaseModel):
    """User data extracted from the session token"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    open_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    role: str = "user"
    dealer_id: Optional[str] = None

    def has_role(self, required_role: str) -> bool:
        return ROLE_HIERARCHY.get(self.role, 0) >= ROLE_HIERARCHY.get(required_role, 0)


def create_session_token(user: SessionUser, expires_in: timedelta = SESSION_TTL) -> str:
    """Sign a session token for a user (used by the OAuth callback and tests)"""
    now = datetime.now(timezone.utc)
    payload = {
        "openId": user.open_id,
        "name": user.name,
        "email": user.email,
        "role": user.role,
        "dealerId": user.dealer_id,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_in).timestamp()),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_session_token(token: str) -> Optional[SessionUser]:
    """
    Decode and validate a session token.

    Returns None for expired, tampered or incomplete tokens; the caller
    is then treated as anonymous.
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except JWTError:
        return None

    open_id = payload.get("openId") or payload.get("sub")
    if not open_id:
        return None

    return SessionUser(
        open_id=open_id,
        name=payload.get("name"),
        email=payload.get("email"),
        role=payload.get("role", "user"),
        dealer_id=payload.get("dealerId"),
    )


def get_session_user(request: Request) -> Optional[SessionUser]:
    """Resolve the session user from the request cookie, if any"""
    token = request.cookies.get(COOKIE_NAME)
    if not token:
        return None
    return decode_session_token(token)


def is_secure_request(request: Request) -> bool:
    if request.url.scheme == "https":
        return True

    forwarded_proto = request.headers.get("x-forwarded-proto", "")
    return any(proto.strip() == "https" for proto in forwarded_proto.split(","))


def get_session_cookie_options(request: Request) -> Dict[str, Any]:
    """
    Cookie policy for the session cookie.

    Browsers reject SameSite=None cookies that are not Secure, so plain
    HTTP (local development) falls back to Lax.
    """
    secure = is_secure_request(request)
    return {
        "domain": settings.COOKIE_DOMAIN,
        "path": "/",
        "httponly": True,
        "secure": secure,
        "samesite": "none" if secure else "lax",
    }

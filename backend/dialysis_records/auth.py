"""
Auth module: password hashing, JWT creation/validation and the
get_current_user FastAPI dependency.

Tokens are HS256, carry the account id (``sub``) and email, and expire after
``JWT_EXPIRE_SECONDS`` (one hour by default). Unlike the public auth routes,
every protected route depends on ``get_current_user``, which raises 401 for a
missing, placeholder ("null"/"undefined"), malformed or expired token.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional

from fastapi import Request
from jose import jwt, JWTError
from werkzeug.security import generate_password_hash, check_password_hash

from dialysis_records.config import get_settings
from dialysis_records.exceptions import Unauthorized

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
PLACEHOLDER_TOKENS = {"null", "undefined"}


@dataclass
class AccountPrincipal:
    """Resolved identity attached to each request."""
    id: int
    email: str

    def owns(self, user_id: Optional[int]) -> bool:
        return user_id == self.id


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    return check_password_hash(password_hash, password)


def create_token(account) -> str:
    """Create a signed JWT for the given Account model instance."""
    settings = get_settings()
    payload = {
        "sub": str(account.id),
        "email": account.email,
        "exp": int(time.time()) + settings.jwt_expire_seconds,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=ALGORITHM)


def decode_token(token: str) -> Optional[AccountPrincipal]:
    """Decode and validate a JWT. Returns None if invalid/expired."""
    try:
        settings = get_settings()
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[ALGORITHM])
        return AccountPrincipal(id=int(payload["sub"]), email=payload.get("email", ""))
    except (JWTError, KeyError, ValueError) as e:
        logger.info("Token verification failed: %s", e)
        return None


def extract_token(request: Request) -> Optional[str]:
    # Legacy clients send the raw token in x-auth-token
    token = request.headers.get("x-auth-token")
    if token:
        return token.strip()
    parts = request.headers.get("Authorization", "").split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


def verify(token: Optional[str]) -> AccountPrincipal:
    if not token or token.lower() in PLACEHOLDER_TOKENS:
        raise Unauthorized("Access denied. No valid token provided.")
    principal = decode_token(token)
    if principal is None:
        raise Unauthorized("Token is not valid or expired")
    return principal


async def get_current_user(request: Request) -> AccountPrincipal:
    """FastAPI dependency. Extracts and verifies the bearer token."""
    return verify(extract_token(request))

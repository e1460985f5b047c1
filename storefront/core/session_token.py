"""Session Token — issue and verify signed credentials bound to an email address.

Invariants:
    - issue_token raises FieldValidationError when email is empty/absent
    - Tokens expire token_ttl days after issuance ("exp" claim, checked on verify)
    - verify_token raises AuthenticationError for missing, malformed, expired or
      foreign-signed tokens, never a PyJWT exception
    - Returned claims always contain "email"

Design Decisions:
    - PyJWT HS256: the credential is interoperable with tokens already issued
      by the previous deployment (same claims, same algorithm)
    - Pure functions: secret and clock passed in, no settings lookup here
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt

from storefront.core.errors import AuthenticationError, FieldValidationError

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_TTL = timedelta(days=365)


@dataclass(frozen=True)
class SessionClaims:
    """Verified identity extracted from a session token."""
    email: str
    expires_at: datetime


def issue_token(
    email: str | None,
    secret: str,
    ttl: timedelta = DEFAULT_TOKEN_TTL,
    algorithm: str = "HS256",
    now: datetime | None = None,
) -> str:
    """Sign a token for email, valid for ttl from now."""
    if not email:
        raise FieldValidationError("Email is required", "email")
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "email": email,
        "iat": issued_at,
        "exp": issued_at + ttl,
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def verify_token(
    token: str | None, secret: str, algorithm: str = "HS256",
) -> SessionClaims:
    """Validate signature and expiry, return the embedded email."""
    if not token:
        raise AuthenticationError("missing")
    try:
        decoded = jwt.decode(
            token, secret, algorithms=[algorithm],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError:
        logger.info("Session token expired")
        raise AuthenticationError("expired")
    except jwt.InvalidTokenError as e:
        logger.info(f"Session token rejected: {e}")
        raise AuthenticationError("invalid")

    email = decoded.get("email")
    if not email:
        raise AuthenticationError("invalid")
    return SessionClaims(
        email=email,
        expires_at=datetime.fromtimestamp(decoded["exp"], tz=timezone.utc),
    )

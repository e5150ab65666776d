"""Pennywise Auth - verification of identity provider tokens.

Sign-up, sign-in and password handling live with the external identity
provider. This package only turns a bearer token issued by that provider
into a verified payload the application can trust.

Architecture:
    pennywise_auth/
    ├── services/           # Pure logic (JWT verification / minting)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from pennywise_auth import JWTService

    payload = JWTService(secret_key="...").verify_token(token)
"""

from pennywise_auth.exceptions import AuthError, InvalidTokenError
from pennywise_auth.schemas import TokenPayload
from pennywise_auth.services import JWTService

__all__ = [
    # Services
    "JWTService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
]

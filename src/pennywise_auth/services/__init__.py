"""Authentication services.

Provides JWT token verification.
"""

from pennywise_auth.services.jwt_service import JWTService

__all__ = [
    "JWTService",
]
